"""Gateway clients. Every client exposes `async initialize(request, abort_controller=None) -> str`."""
