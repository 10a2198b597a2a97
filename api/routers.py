from rest_framework import routers
from comments.views import CommentViewSet


# Paths match the overlay client exactly: /api/comments, /api/comments/{id}
router = routers.DefaultRouter(trailing_slash=False)

# Register all ViewSets
router.register(r'comments', CommentViewSet, basename='comment')

urlpatterns = router.urls
