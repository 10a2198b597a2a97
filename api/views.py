from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness probe for the load balancer"""
    return Response({
        'status': 'OK',
        'timestamp': timezone.now().isoformat(),
    })
