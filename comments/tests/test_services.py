from datetime import datetime, timedelta, timezone as dt_timezone
from unittest import mock

from django.test import SimpleTestCase, TestCase

from comments.exceptions import NotFoundError, ValidationError
from comments.models import Comment
from comments.services import CommentService


def create_payload(**overrides):
    data = {
        'page_url': 'http://localhost:5173/',
        'content': 'Test comment',
        'position_x': 100,
        'position_y': 200,
        'author_name': 'Test User',
        'author_email': 'test@example.com',
    }
    data.update(overrides)
    return data


class CommentServiceCreateTests(TestCase):
    def setUp(self):
        self.service = CommentService()

    def test_create_fills_defaults(self):
        comment = self.service.create({
            'page_url': 'P', 'content': 'C', 'position_x': 1, 'position_y': 2,
        })

        self.assertEqual(comment['status'], 'OPEN')
        self.assertEqual(comment['priority'], 'MEDIUM')
        self.assertEqual(comment['category'], 'GENERAL')
        self.assertEqual(comment['pageUrl'], 'P')
        self.assertEqual(comment['positionX'], 1)
        self.assertEqual(comment['positionY'], 2)

    def test_create_treats_null_enums_as_omitted(self):
        comment = self.service.create(create_payload(status=None, priority=None, category=None))

        self.assertEqual(comment['status'], 'OPEN')
        self.assertEqual(comment['priority'], 'MEDIUM')
        self.assertEqual(comment['category'], 'GENERAL')

    def test_create_keeps_given_values(self):
        comment = self.service.create(create_payload(
            status='IN_PROGRESS', priority='CRITICAL', category='BUG',
            screenshot_url='https://cdn.example.com/shot.png',
        ))

        self.assertEqual(comment['status'], 'IN_PROGRESS')
        self.assertEqual(comment['priority'], 'CRITICAL')
        self.assertEqual(comment['category'], 'BUG')
        self.assertEqual(comment['screenshotUrl'], 'https://cdn.example.com/shot.png')
        self.assertEqual(comment['authorName'], 'Test User')

    def test_create_sets_equal_timestamps(self):
        comment = self.service.create(create_payload())

        self.assertIsNotNone(comment['id'])
        self.assertEqual(comment['createdAt'], comment['updatedAt'])

    def test_create_rejects_missing_fields(self):
        for field in ('page_url', 'content', 'position_x', 'position_y'):
            data = create_payload()
            del data[field]
            with self.subTest(field=field):
                with self.assertRaises(ValidationError):
                    self.service.create(data)

        self.assertEqual(Comment.objects.count(), 0)

    def test_create_rejects_blank_text(self):
        with self.assertRaises(ValidationError):
            self.service.create(create_payload(content='   '))
        with self.assertRaises(ValidationError):
            self.service.create(create_payload(page_url=''))


class CommentServiceUpdateTests(TestCase):
    def setUp(self):
        self.service = CommentService()
        self.comment = self.service.create(create_payload(category='BUG'))

    def test_partial_update_only_touches_given_fields(self):
        updated = self.service.update(self.comment['id'], {'status': 'RESOLVED'})

        self.assertEqual(updated['status'], 'RESOLVED')
        self.assertEqual(updated['content'], 'Test comment')
        self.assertEqual(updated['authorName'], 'Test User')
        self.assertEqual(updated['priority'], 'MEDIUM')
        self.assertEqual(updated['category'], 'BUG')

    def test_update_ignores_none_values(self):
        updated = self.service.update(self.comment['id'], {
            'content': None, 'priority': 'HIGH', 'resolution': None,
        })

        self.assertEqual(updated['content'], 'Test comment')
        self.assertEqual(updated['priority'], 'HIGH')
        self.assertIsNone(updated['resolution'])

    def test_update_writes_triage_fields(self):
        updated = self.service.update(self.comment['id'], {
            'resolution': 'Fixed in 1.2.0', 'assigned_to': 'frontend-team',
        })

        self.assertEqual(updated['resolution'], 'Fixed in 1.2.0')
        self.assertEqual(updated['assignedTo'], 'frontend-team')

    def test_update_empty_string_overwrites(self):
        self.service.update(self.comment['id'], {'resolution': 'Won\'t fix'})
        updated = self.service.update(self.comment['id'], {'resolution': ''})

        self.assertEqual(updated['resolution'], '')

    def test_update_ignores_immutable_fields(self):
        updated = self.service.update(self.comment['id'], {
            'page_url': 'http://elsewhere/', 'position_x': 5, 'author_name': 'Someone',
        })

        self.assertEqual(updated['pageUrl'], 'http://localhost:5173/')
        self.assertEqual(updated['positionX'], 100)
        self.assertEqual(updated['authorName'], 'Test User')

    def test_update_refreshes_updated_at_but_not_created_at(self):
        stored = Comment.objects.get(pk=self.comment['id'])
        later = stored.created_at + timedelta(minutes=5)
        latest = stored.created_at + timedelta(minutes=10)

        with mock.patch('django.utils.timezone.now', return_value=later):
            self.service.update(self.comment['id'], {})
        first = Comment.objects.get(pk=self.comment['id'])

        with mock.patch('django.utils.timezone.now', return_value=latest):
            self.service.update(self.comment['id'], {'status': 'CLOSED'})
        second = Comment.objects.get(pk=self.comment['id'])

        self.assertEqual(first.created_at, stored.created_at)
        self.assertEqual(second.created_at, stored.created_at)
        self.assertEqual(first.updated_at, later)
        self.assertEqual(second.updated_at, latest)
        self.assertLessEqual(second.created_at, second.updated_at)

    def test_update_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.service.update(99999, {'status': 'RESOLVED'})


class CommentServiceLookupTests(TestCase):
    def setUp(self):
        self.service = CommentService()

    def test_get_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.service.get(99999)
        self.assertEqual(ctx.exception.comment_id, 99999)

    def test_delete_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.service.delete(99999)

    def test_delete_then_get_raises_not_found(self):
        comment = self.service.create(create_payload())

        self.assertIsNone(self.service.delete(comment['id']))
        with self.assertRaises(NotFoundError):
            self.service.get(comment['id'])

    def test_list_by_page_url_is_exact(self):
        match = self.service.create(create_payload(page_url='http://localhost:5173/pricing'))
        self.service.create(create_payload(page_url='http://localhost:5173/pricing/enterprise'))
        self.service.create(create_payload(page_url='http://localhost:5173/'))

        found = self.service.list_by_page_url('http://localhost:5173/pricing')
        self.assertEqual([comment['id'] for comment in found], [match['id']])

    def test_list_returns_empty_when_nothing_matches(self):
        self.assertEqual(list(self.service.list_all()), [])
        self.assertEqual(list(self.service.list_by_page_url('http://nowhere/')), [])
        self.assertEqual(list(self.service.list_by_status('CLOSED')), [])

    def test_list_by_status(self):
        self.service.create(create_payload())
        closed = self.service.create(create_payload(status='CLOSED'))

        found = self.service.list_by_status('CLOSED')
        self.assertEqual([comment['id'] for comment in found], [closed['id']])


class InMemoryCommentRepository:
    """Dict-backed store with the same interface as CommentRepository"""

    def __init__(self):
        self.records = {}
        self.next_id = 1

    def insert(self, comment):
        comment.id = self.next_id
        self.next_id += 1
        self.records[comment.id] = comment
        return comment

    def find_by_id(self, comment_id):
        return self.records.get(comment_id)

    def find_all(self):
        return list(self.records.values())

    def find_by_page_url(self, page_url):
        return [c for c in self.records.values() if c.page_url == page_url]

    def find_by_status(self, status):
        return [c for c in self.records.values() if c.status == status]

    def update(self, comment):
        self.records[comment.id] = comment
        return comment

    def exists_by_id(self, comment_id):
        return comment_id in self.records

    def delete_by_id(self, comment_id):
        self.records.pop(comment_id, None)


class CommentServiceInjectedRepositoryTests(SimpleTestCase):
    """The service only talks to the repository it was given (no database access here)"""

    def setUp(self):
        self.repository = InMemoryCommentRepository()
        self.service = CommentService(repository=self.repository)

    def test_create_and_get_use_injected_store(self):
        comment = self.service.create(create_payload())

        self.assertEqual(comment['id'], 1)
        self.assertIn(1, self.repository.records)
        self.assertEqual(self.service.get(1)['content'], 'Test comment')

    def test_update_refreshes_timestamp(self):
        created_at = datetime(2024, 1, 1, 12, 0, tzinfo=dt_timezone.utc)
        with mock.patch('django.utils.timezone.now', return_value=created_at):
            self.service.create(create_payload())

        later = created_at + timedelta(seconds=30)
        with mock.patch('django.utils.timezone.now', return_value=later):
            self.service.update(1, {})

        stored = self.repository.records[1]
        self.assertEqual(stored.created_at, created_at)
        self.assertEqual(stored.updated_at, later)

    def test_delete_removes_from_store(self):
        self.service.create(create_payload())
        self.service.delete(1)

        self.assertEqual(self.repository.records, {})
        with self.assertRaises(NotFoundError):
            self.service.delete(1)
