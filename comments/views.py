import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from .exceptions import ValidationError
from .models import Comment
from .serializers import CommentCreateSerializer, CommentUpdateSerializer
from .services import CommentService

logger = logging.getLogger(__name__)


class CommentViewSet(viewsets.ViewSet):
    """
    ViewSet for page-anchored UI comments.

    List: GET /api/comments
    Create: POST /api/comments
    Retrieve: GET /api/comments/{id}
    Update: PUT/PATCH /api/comments/{id} (partial, mutable fields only)
    Delete: DELETE /api/comments/{id}

    Custom actions:
    - page: GET /api/comments/page?url=<page url>
    - by_status: GET /api/comments/status/{status}
    """
    lookup_value_regex = r'\d+'
    service_class = CommentService

    def get_service(self):
        return self.service_class()

    def list(self, request, *args, **kwargs):
        logger.info("Received request to get all comments")
        return Response(self.get_service().list_all())

    def create(self, request, *args, **kwargs):
        logger.info("Received request to create comment")
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        comment = self.get_service().create(serializer.validated_data)
        return Response(comment, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None, *args, **kwargs):
        logger.info(f"Received request to get comment with ID: {pk}")
        return Response(self.get_service().get(int(pk)))

    def update(self, request, pk=None, *args, **kwargs):
        """Only fields present in the body are changed, for PUT as well as PATCH"""
        logger.info(f"Received request to update comment with ID: {pk}")
        serializer = CommentUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        comment = self.get_service().update(int(pk), serializer.validated_data)
        return Response(comment)

    def partial_update(self, request, pk=None, *args, **kwargs):
        return self.update(request, pk, *args, **kwargs)

    def destroy(self, request, pk=None, *args, **kwargs):
        logger.info(f"Received request to delete comment with ID: {pk}")
        self.get_service().delete(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'])
    def page(self, request, *args, **kwargs):
        """
        Comments left on one page (exact URL match).
        GET /api/comments/page?url=http://localhost:5173/
        """
        page_url = request.query_params.get('url')
        logger.info(f"Received request to get comments for page: {page_url}")
        if not page_url or not page_url.strip():
            raise ValidationError("url query parameter is required")

        return Response(self.get_service().list_by_page_url(page_url))

    @action(detail=False, methods=['get'], url_path=r'status/(?P<comment_status>[^/.]+)')
    def by_status(self, request, comment_status=None, *args, **kwargs):
        """
        Comments in one workflow state.
        GET /api/comments/status/OPEN
        """
        logger.info(f"Received request to get comments with status: {comment_status}")
        valid_statuses = [choice for choice, _ in Comment.STATUS_CHOICES]
        if comment_status not in valid_statuses:
            raise ValidationError(
                f"Invalid status '{comment_status}'. Must be one of: {', '.join(valid_statuses)}"
            )

        return Response(self.get_service().list_by_status(comment_status))
