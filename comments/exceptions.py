"""
Errors raised by the comment service.
The API layer turns these into 400/404 responses (see api.exceptions).
"""


class CommentError(Exception):
    """Base class for comment operation failures"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(CommentError):
    """A required field is missing or blank"""


class NotFoundError(CommentError):
    """No comment exists with the given id"""

    def __init__(self, comment_id):
        super().__init__(f"Comment not found with ID: {comment_id}")
        self.comment_id = comment_id
