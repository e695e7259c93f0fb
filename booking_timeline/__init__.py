"""Booking timeline: slot grid, lane packing and free-time ranges for a day of bookings."""
