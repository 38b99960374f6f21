"""Notifications app package.

Delivers booking confirmations by email. Booking workflows talk to the
``Notifier`` contract defined here; the concrete notifier is chosen via
the ``NOTIFIER_CLASS`` setting so tests and alternative channels can
swap it out.
"""
