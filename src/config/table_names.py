from enum import Enum


class TableNames(str, Enum):
    GUESTS = "guests"
    EVENTS = "events"
    GUEST_EVENT_INVITES = "guest_event_invites"
    PHOTOS = "photos"
    ACTIVITIES = "activities"
    GUEST_ACTIVITY_INTERESTS = "guest_activity_interests"
    EMAIL_TEMPLATES = "email_templates"
