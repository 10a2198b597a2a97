from rest_framework import serializers
from .models import Comment

# Range of the 32-bit integer position columns
POSITION_MIN = -2147483648
POSITION_MAX = 2147483647


class CommentSerializer(serializers.ModelSerializer):
    """External record shape (camelCase keys, as the overlay client expects)"""
    pageUrl = serializers.CharField(source='page_url', read_only=True)
    positionX = serializers.IntegerField(source='position_x', read_only=True)
    positionY = serializers.IntegerField(source='position_y', read_only=True)
    screenshotUrl = serializers.CharField(source='screenshot_url', read_only=True)
    authorName = serializers.CharField(source='author_name', read_only=True)
    authorEmail = serializers.CharField(source='author_email', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    assignedTo = serializers.CharField(source='assigned_to', read_only=True)

    class Meta:
        model = Comment
        fields = [
            'id', 'pageUrl', 'content', 'positionX', 'positionY',
            'screenshotUrl', 'status', 'priority', 'authorName', 'authorEmail',
            'category', 'createdAt', 'updatedAt', 'resolution', 'assignedTo',
        ]
        read_only_fields = fields


class CommentCreateSerializer(serializers.Serializer):
    """Payload for creating a comment. Omitted enums fall back to model defaults."""
    pageUrl = serializers.CharField(source='page_url', max_length=2048)
    content = serializers.CharField()
    positionX = serializers.IntegerField(
        source='position_x', min_value=POSITION_MIN, max_value=POSITION_MAX
    )
    positionY = serializers.IntegerField(
        source='position_y', min_value=POSITION_MIN, max_value=POSITION_MAX
    )
    screenshotUrl = serializers.CharField(
        source='screenshot_url', max_length=2048,
        required=False, allow_null=True, allow_blank=True
    )
    status = serializers.ChoiceField(choices=Comment.STATUS_CHOICES, required=False, allow_null=True)
    priority = serializers.ChoiceField(choices=Comment.PRIORITY_CHOICES, required=False, allow_null=True)
    category = serializers.ChoiceField(choices=Comment.CATEGORY_CHOICES, required=False, allow_null=True)
    authorName = serializers.CharField(
        source='author_name', max_length=255,
        required=False, allow_null=True, allow_blank=True
    )
    authorEmail = serializers.EmailField(
        source='author_email', max_length=254,
        required=False, allow_null=True, allow_blank=True
    )


class CommentUpdateSerializer(serializers.Serializer):
    """
    Payload for a partial update. Only the mutable subset is accepted;
    use with partial=True so validated_data holds just the keys that were sent.
    """
    content = serializers.CharField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=Comment.STATUS_CHOICES, required=False, allow_null=True)
    priority = serializers.ChoiceField(choices=Comment.PRIORITY_CHOICES, required=False, allow_null=True)
    category = serializers.ChoiceField(choices=Comment.CATEGORY_CHOICES, required=False, allow_null=True)
    resolution = serializers.CharField(
        max_length=1000, required=False, allow_null=True, allow_blank=True
    )
    assignedTo = serializers.CharField(
        source='assigned_to', max_length=255,
        required=False, allow_null=True, allow_blank=True
    )
