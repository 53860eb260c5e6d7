"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas and the HTML page
templates. No business logic belongs here.
"""
