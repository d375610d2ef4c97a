"""
Interfaces layer package.

Contains FastAPI routers and Pydantic request/response schemas.
Requests are validated before a route runs; routes call the
application service and shape its result into a response.
No business logic belongs here.
"""
