from django.contrib import admin
from django.utils import timezone
from .models import Comment


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Admin interface for triaging UI comments"""
    list_display = ['id', 'content_preview', 'page_url', 'status', 'priority', 'category', 'assigned_to', 'created_at']
    list_filter = ['status', 'priority', 'category', 'created_at']
    readonly_fields = ['page_url', 'position_x', 'position_y', 'screenshot_url', 'author_name', 'author_email', 'created_at', 'updated_at']
    fields = [
        'page_url', 'position_x', 'position_y', 'screenshot_url',
        'content', 'status', 'priority', 'category',
        'author_name', 'author_email',
        'resolution', 'assigned_to',
        'created_at', 'updated_at',
    ]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def content_preview(self, obj):
        return obj.content[:80] + '...' if len(obj.content) > 80 else obj.content
    content_preview.short_description = 'Content'

    def has_add_permission(self, request):
        """Comments are created from the page overlay through the API"""
        return False

    def save_model(self, request, obj, form, change):
        obj.updated_at = timezone.now()
        super().save_model(request, obj, form, change)
