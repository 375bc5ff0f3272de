import enum


class TabId(str, enum.Enum):
    """Sections of the single page, one visible at a time."""

    home = "home"
    about = "about"
    projects = "projects"
    contact = "contact"


class FormField(str, enum.Enum):
    name = "name"
    email = "email"
    message = "message"


class SubmissionStatus(str, enum.Enum):
    """Lifecycle of the contact form's submit control."""

    idle = "idle"
    pending = "pending"
    succeeded = "succeeded"
    failed = "failed"


class FailureReason(str, enum.Enum):
    validation = "validation"
    verification_missing = "verification_missing"
    delivery = "delivery"


class NotificationLevel(str, enum.Enum):
    success = "success"
    error = "error"
