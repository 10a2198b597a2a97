from django.db import models
from django.utils import timezone


class Comment(models.Model):
    """
    Feedback comment pinned to a point on a web page.
    Identified by the page URL plus the x/y position the reviewer clicked.
    """
    STATUS_CHOICES = [
        ('OPEN', 'Open'),
        ('IN_PROGRESS', 'In Progress'),
        ('RESOLVED', 'Resolved'),
        ('CLOSED', 'Closed'),
    ]

    PRIORITY_CHOICES = [
        ('LOW', 'Low'),
        ('MEDIUM', 'Medium'),
        ('HIGH', 'High'),
        ('CRITICAL', 'Critical'),
    ]

    CATEGORY_CHOICES = [
        ('BUG', 'Bug'),
        ('FEATURE', 'Feature'),
        ('IMPROVEMENT', 'Improvement'),
        ('QUESTION', 'Question'),
        ('GENERAL', 'General'),
    ]

    DEFAULT_STATUS = 'OPEN'
    DEFAULT_PRIORITY = 'MEDIUM'
    DEFAULT_CATEGORY = 'GENERAL'

    page_url = models.CharField(max_length=2048)
    content = models.TextField()
    position_x = models.IntegerField()
    position_y = models.IntegerField()
    screenshot_url = models.CharField(max_length=2048, blank=True, null=True)

    status = models.CharField(max_length=50, choices=STATUS_CHOICES, default=DEFAULT_STATUS)
    priority = models.CharField(max_length=50, choices=PRIORITY_CHOICES, default=DEFAULT_PRIORITY)
    category = models.CharField(max_length=100, choices=CATEGORY_CHOICES, default=DEFAULT_CATEGORY)

    author_name = models.CharField(max_length=255, blank=True, null=True)
    author_email = models.EmailField(blank=True, null=True)

    # Triage
    resolution = models.CharField(max_length=1000, blank=True, null=True)
    assigned_to = models.CharField(max_length=255, blank=True, null=True)

    # Set by the service layer so both stamps share one clock reading on create
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'comments'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['page_url'], name='comments_page_url_idx'),
            models.Index(fields=['status'], name='comments_status_idx'),
        ]

    def __str__(self):
        return f"{self.page_url} ({self.position_x}, {self.position_y}): {self.content[:50]}"
