ACTIVITIES_URL = "/activities"
ACTIVITY_INTEREST_URL = "/activities/{activity_id}/interest"
VENUES_URL = "/venues"
ADMIN_ACTIVITIES_URL = "/admin/activities"
ADMIN_ACTIVITY_URL = "/admin/activities/{activity_id}"
