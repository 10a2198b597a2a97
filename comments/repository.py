from .models import Comment


class CommentRepository:
    """
    Storage collection for comments, backed by the Django ORM.
    Missing ids come back as None / False, never as an exception.
    """

    def __init__(self, model=Comment):
        self.model = model

    def insert(self, comment):
        """Save a new comment and return it with its assigned id"""
        comment.save(force_insert=True)
        return comment

    def find_by_id(self, comment_id):
        return self.model.objects.filter(pk=comment_id).first()

    def find_all(self):
        return list(self.model.objects.all())

    def find_by_page_url(self, page_url):
        return list(self.model.objects.filter(page_url=page_url))

    def find_by_status(self, status):
        return list(self.model.objects.filter(status=status))

    def update(self, comment):
        comment.save(force_update=True)
        return comment

    def exists_by_id(self, comment_id):
        return self.model.objects.filter(pk=comment_id).exists()

    def delete_by_id(self, comment_id):
        self.model.objects.filter(pk=comment_id).delete()
