# Admin
ADMIN_EVENTS_URL = "/admin/events"
ADMIN_EVENT_URL = "/admin/events/{event_id}"
ADMIN_EVENT_INVITES_URL = "/admin/events/{event_id}/invites"
ADMIN_EVENT_SEND_INVITES_URL = "/admin/events/{event_id}/send-invites"

# Guest facing
EVENT_RSVP_VERIFY_URL = "/events/rsvp/verify"
EVENT_RSVP_SUBMIT_URL = "/events/rsvp/submit"

# Links sent in emails
EVENT_RSVP_PAGE_URL = "{frontend_url}/events/rsvp?code={invite_code}&event={event_id}"
