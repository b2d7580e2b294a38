"""Domain errors raised by the notification dispatcher."""


class GroupMailerError(Exception):
    """Base class for expected, client-facing failures."""

    status_code = 500
    message = "Error sending email to doctors"

    def __init__(self, group_id: str):
        super().__init__(f"{self.message}: {group_id}")
        self.group_id = group_id


class GroupNotFoundError(GroupMailerError):
    status_code = 404
    message = "Group not found"


class NoDoctorsError(GroupMailerError):
    status_code = 400
    message = "No doctors found in the group"
