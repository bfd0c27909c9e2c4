from dataclasses import dataclass

_HTML_HEAD = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
"""

_HTML_FOOT = """
        <hr style="border: none; border-top: 1px solid #ddd; margin: 30px 0;">

        <p style="font-size: 12px; color: #888; text-align: center;">
            If you have any questions, please don't hesitate to contact us.
        </p>
    </body>
    </html>
"""


@dataclass
class EmailTemplates:
    INVITATION_SUBJECT = "You're Invited to Our Wedding!"
    INVITATION_HTML = (
        _HTML_HEAD
        + """
        <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #d4a373;">Save the Date!</h1>
        </div>

        <p>Dear {guest_name},</p>

        <p>We are delighted to invite you to our wedding celebration!</p>

        <div style="background-color: #fefae0; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <p><strong>Your invite code:</strong> {invite_code}</p>
        </div>

        <div style="text-align: center; margin: 30px 0;">
            <a href="{rsvp_url}" style="background-color: #d4a373; color: white; padding: 15px 30px; text-decoration: none; border-radius: 5px; font-size: 18px;">
                RSVP Now
            </a>
        </div>

        <p>If the button doesn't work, you can copy and paste the following link into your browser:</p>
        <p style="word-break: break-all; color: #606c38;"><a href="{rsvp_url}">{rsvp_url}</a></p>

        <p>With love,<br>{couple_names}</p>
"""
        + _HTML_FOOT
    )
    INVITATION_TEXT = """
    Dear {guest_name},

    We are delighted to invite you to our wedding celebration!

    Your invite code: {invite_code}

    RSVP here: {rsvp_url}

    With love,
    {couple_names}
    """

    EVENT_INVITATION_SUBJECT = "You're Invited: {event_name}"
    EVENT_INVITATION_HTML = (
        _HTML_HEAD
        + """
        <p>Dear {guest_name},</p>

        <p>We would love for you to join us for <strong>{event_name}</strong>.</p>

        <div style="background-color: #fefae0; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <p><strong>Date:</strong> {event_date}</p>
            <p><strong>Time:</strong> {event_time}</p>
            <p><strong>Location:</strong> {event_location}</p>
            <p>{event_description}</p>
        </div>

        <div style="text-align: center; margin: 30px 0;">
            <a href="{rsvp_url}" style="background-color: #d4a373; color: white; padding: 15px 30px; text-decoration: none; border-radius: 5px; font-size: 18px;">
                Let us know
            </a>
        </div>

        <p>With love,<br>{couple_names}</p>
"""
        + _HTML_FOOT
    )
    EVENT_INVITATION_TEXT = """
    Dear {guest_name},

    We would love for you to join us for {event_name}.

    Date: {event_date}
    Time: {event_time}
    Location: {event_location}

    {event_description}

    Let us know here: {rsvp_url}

    With love,
    {couple_names}
    """

    RSVP_NOTIFICATION_SUBJECT = "New RSVP from {guest_name}"
    RSVP_NOTIFICATION_HTML = (
        _HTML_HEAD
        + """
        <h2 style="color: #bc6c25;">New RSVP</h2>
        <p><strong>Guest:</strong> {guest_name}</p>
        <p><strong>Attending:</strong> {attending}</p>
        <p><strong>Dietary restrictions:</strong> {dietary}</p>
        <p><strong>Plus one:</strong> {plus_one}</p>
"""
        + _HTML_FOOT
    )
    RSVP_NOTIFICATION_TEXT = """
    New RSVP

    Guest: {guest_name}
    Attending: {attending}
    Dietary restrictions: {dietary}
    Plus one: {plus_one}
    """

    EVENT_RSVP_NOTIFICATION_SUBJECT = "{event_name}: RSVP from {guest_name}"
    EVENT_RSVP_NOTIFICATION_HTML = (
        _HTML_HEAD
        + """
        <h2 style="color: #bc6c25;">{event_name}</h2>
        <p><strong>Guest:</strong> {guest_name}</p>
        <p><strong>Attending:</strong> {attending}</p>
"""
        + _HTML_FOOT
    )
    EVENT_RSVP_NOTIFICATION_TEXT = """
    {event_name}

    Guest: {guest_name}
    Attending: {attending}
    """

    ACTIVITIES_SUBJECT = "Things to do while you're in town"
    ACTIVITIES_HTML = (
        _HTML_HEAD
        + """
        <p>Dear {guest_name},</p>

        <p>We put together a list of our favourite places to eat, drink and explore.
        Let us know which ones you'd like to join!</p>

        <div style="text-align: center; margin: 30px 0;">
            <a href="{activities_url}" style="background-color: #d4a373; color: white; padding: 15px 30px; text-decoration: none; border-radius: 5px; font-size: 18px;">
                See the list
            </a>
        </div>

        <p>With love,<br>{couple_names}</p>
"""
        + _HTML_FOOT
    )
    ACTIVITIES_TEXT = """
    Dear {guest_name},

    We put together a list of our favourite places to eat, drink and explore.
    Let us know which ones you'd like to join: {activities_url}

    With love,
    {couple_names}
    """

    @classmethod
    def get_invitation_templates(cls) -> tuple[str, str, str]:
        return cls.INVITATION_SUBJECT, cls.INVITATION_HTML, cls.INVITATION_TEXT

    @classmethod
    def get_event_invitation_templates(cls) -> tuple[str, str, str]:
        return cls.EVENT_INVITATION_SUBJECT, cls.EVENT_INVITATION_HTML, cls.EVENT_INVITATION_TEXT

    @classmethod
    def get_rsvp_notification_templates(cls) -> tuple[str, str, str]:
        return cls.RSVP_NOTIFICATION_SUBJECT, cls.RSVP_NOTIFICATION_HTML, cls.RSVP_NOTIFICATION_TEXT

    @classmethod
    def get_event_rsvp_notification_templates(cls) -> tuple[str, str, str]:
        return (
            cls.EVENT_RSVP_NOTIFICATION_SUBJECT,
            cls.EVENT_RSVP_NOTIFICATION_HTML,
            cls.EVENT_RSVP_NOTIFICATION_TEXT,
        )

    @classmethod
    def get_activities_templates(cls) -> tuple[str, str, str]:
        return cls.ACTIVITIES_SUBJECT, cls.ACTIVITIES_HTML, cls.ACTIVITIES_TEXT
