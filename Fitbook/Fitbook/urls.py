"""
Fitbook URL Configuration
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path('admin/', admin.site.urls),

    # API v1
    path('api/v1/', include('user.urls_v1')),
    path('api/v1/', include('classes.urls_v1')),
    path('api/v1/', include('booking.urls_v1')),
    path('api/v1/', include('ledger.urls_v1')),
    path('api/v1/', include('payment.urls_v1')),

    # API documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
