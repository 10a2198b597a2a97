from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.test import APITestCase

from api.exceptions import exception_handler
from comments.exceptions import NotFoundError, ValidationError


class HealthCheckTests(APITestCase):
    def test_health(self):
        response = self.client.get('/api/health')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'OK')
        self.assertIn('timestamp', response.data)


class ExceptionHandlerTests(SimpleTestCase):
    def test_not_found_maps_to_404(self):
        response = exception_handler(NotFoundError(42), {})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': 'Comment not found with ID: 42'})

    def test_validation_error_maps_to_400(self):
        response = exception_handler(ValidationError('url query parameter is required'), {})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'error': 'url query parameter is required'})

    def test_drf_errors_use_default_handler(self):
        response = exception_handler(ParseError('bad json'), {})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unexpected_errors_are_not_handled(self):
        self.assertIsNone(exception_handler(RuntimeError('database unavailable'), {}))
