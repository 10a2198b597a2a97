import logging

from django.utils import timezone

from .exceptions import NotFoundError, ValidationError
from .models import Comment
from .repository import CommentRepository
from .serializers import CommentSerializer

logger = logging.getLogger(__name__)


class CommentService:
    """
    Comment operations: create with defaults, partial update, lookups, delete.

    The repository is passed in so callers (and tests) decide which store
    backs the service. Every result is the external record shape produced by
    CommentSerializer.
    """

    REQUIRED_TEXT_FIELDS = ('page_url', 'content')
    REQUIRED_INT_FIELDS = ('position_x', 'position_y')

    # Fields a partial update may overwrite; everything else is fixed at creation
    UPDATABLE_FIELDS = ('content', 'status', 'priority', 'resolution', 'assigned_to', 'category')

    def __init__(self, repository=None):
        self.repository = repository or CommentRepository()

    def create(self, data):
        """
        Create a comment from a payload keyed by model field names.
        Raises ValidationError when page_url, content or a position is missing.
        """
        self._validate_required(data)
        logger.info(f"Creating new comment for page: {data['page_url']}")

        now = timezone.now()
        comment = Comment(
            page_url=data['page_url'],
            content=data['content'],
            position_x=data['position_x'],
            position_y=data['position_y'],
            screenshot_url=data.get('screenshot_url'),
            status=data.get('status') or Comment.DEFAULT_STATUS,
            priority=data.get('priority') or Comment.DEFAULT_PRIORITY,
            category=data.get('category') or Comment.DEFAULT_CATEGORY,
            author_name=data.get('author_name'),
            author_email=data.get('author_email'),
            created_at=now,
            updated_at=now,
        )

        saved = self.repository.insert(comment)
        logger.info(f"Comment created successfully with ID: {saved.id}")
        return self.to_representation(saved)

    def get(self, comment_id):
        logger.info(f"Fetching comment with ID: {comment_id}")
        return self.to_representation(self._load(comment_id))

    def list_all(self):
        logger.info("Fetching all comments")
        return self.to_representation(self.repository.find_all(), many=True)

    def list_by_page_url(self, page_url):
        logger.info(f"Fetching comments for page: {page_url}")
        return self.to_representation(self.repository.find_by_page_url(page_url), many=True)

    def list_by_status(self, status):
        logger.info(f"Fetching comments with status: {status}")
        return self.to_representation(self.repository.find_by_status(status), many=True)

    def update(self, comment_id, changes):
        """
        Apply a partial update. Only UPDATABLE_FIELDS present in `changes`
        with a non-None value are written; updated_at is always refreshed.
        """
        logger.info(f"Updating comment with ID: {comment_id}")
        comment = self._load(comment_id)

        for field in self.UPDATABLE_FIELDS:
            value = changes.get(field)
            if value is not None:
                setattr(comment, field, value)

        comment.updated_at = timezone.now()
        updated = self.repository.update(comment)
        logger.info(f"Comment updated successfully with ID: {updated.id}")
        return self.to_representation(updated)

    def delete(self, comment_id):
        logger.info(f"Deleting comment with ID: {comment_id}")
        if not self.repository.exists_by_id(comment_id):
            raise NotFoundError(comment_id)

        self.repository.delete_by_id(comment_id)
        logger.info(f"Comment deleted successfully with ID: {comment_id}")

    def to_representation(self, instance, many=False):
        return CommentSerializer(instance, many=many).data

    def _load(self, comment_id):
        comment = self.repository.find_by_id(comment_id)
        if comment is None:
            logger.warning(f"Comment not found with ID: {comment_id}")
            raise NotFoundError(comment_id)
        return comment

    def _validate_required(self, data):
        missing = [
            field for field in self.REQUIRED_TEXT_FIELDS
            if not isinstance(data.get(field), str) or not data[field].strip()
        ]
        missing += [field for field in self.REQUIRED_INT_FIELDS if data.get(field) is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
