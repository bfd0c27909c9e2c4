PHOTOS_URL = "/photos"
ADMIN_PHOTOS_URL = "/admin/photos"
ADMIN_PHOTO_URL = "/admin/photos/{photo_id}"
