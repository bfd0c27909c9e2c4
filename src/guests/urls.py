# Admin
ADMIN_GUESTS_URL = "/admin/guests"
ADMIN_GUEST_URL = "/admin/guests/{guest_id}"
ADMIN_SEND_INVITATIONS_URL = "/admin/guests/send-invitations"
ADMIN_SEND_ACTIVITIES_EMAIL_URL = "/admin/guests/send-activities-email"

# Guest facing
RSVP_VERIFY_URL = "/rsvp/verify"
RSVP_SUBMIT_URL = "/rsvp/submit"
RSVP_CONTACT_URL = "/rsvp/contact"
RSVP_PARTY_URL = "/rsvp/party"
RSVP_LINK_URL = "/rsvp/link"

# Links sent in emails
RSVP_PAGE_URL = "{frontend_url}/rsvp?code={invite_code}"
ACTIVITIES_PAGE_URL = "{frontend_url}/things-to-do?code={invite_code}"
