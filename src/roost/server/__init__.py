"""Server — ASGI request pipeline, response sending, and the host listener."""
