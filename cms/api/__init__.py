"""
HTTP surface of the CMS.

Handlers stay thin: they parse the request into a schema, hand the
resulting entity to a service and serialize what comes back. Errors
raised by services are turned into JSON bodies by the middleware.

Layout:
=======
    api/
    ├── main.py           ← create_application() and the ASGI app
    ├── routes.py         ← URL prefixes per resource
    ├── dependencies/     ← db session, auth, services, pagination
    ├── handlers/         ← one router per resource
    └── middleware/       ← exception to response mapping

Running:
========
    uvicorn cms.api.main:app --reload
"""
