"""
Alarm relay service package.

This service is responsible for:
- Tracking WebSocket connections from phones and their reported location.
- Broadcasting operator commands (play, stop, location toggles) to every phone.
- Exposing connection status for the control panel to poll.

The HTTP/WebSocket server is implemented with Tornado.
"""
