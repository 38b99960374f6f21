"""Desks app package.

Hot desks booked for a whole calendar day. A desk carries a stored
status and occupant that the booking workflow updates on booking and
resets on cancellation; availability for a date is derived from the
bookings themselves.
"""
