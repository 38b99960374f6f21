"""Meeting rooms app package.

Meeting rooms are booked by time slot on a given day. Booking never
touches the room's stored status: availability and status are derived
from the bookings at read time, and the stored field is only a cache
refreshed by a periodic task.
"""
