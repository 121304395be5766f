"""
Interaction event log.

Responsibilities:
- Accept tagged user interaction events (open, like, share, ...).
- Keep the most recent events in a bounded in-memory ring buffer.
- Summarise counts by event type and by food mode.
"""
