"""
Deposit host-auth HTTP application.

The app itself is built by `apps.api.main.app.create_app`; importing this package
does not read the environment or construct routers.
"""
