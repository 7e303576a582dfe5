# app/models/__init__.py

from .company.delivery_zone import DeliveryZone
from .company.app_settings import AppSettings
