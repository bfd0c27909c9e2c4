ADMIN_TEMPLATES_URL = "/admin/templates"
ADMIN_TEMPLATE_URL = "/admin/templates/{template_id}"
ADMIN_TEMPLATE_DUPLICATE_URL = "/admin/templates/{template_id}/duplicate"
ADMIN_TEMPLATE_PUBLISH_URL = "/admin/templates/{template_id}/publish"
