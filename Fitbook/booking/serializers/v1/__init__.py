from .booking import BookingSerializer, BookedClassSerializer, CreateBookingSerializer

__all__ = ['BookingSerializer', 'BookedClassSerializer', 'CreateBookingSerializer']
