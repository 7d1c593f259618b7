from drf_spectacular.extensions import OpenApiAuthenticationExtension


class SessionUserAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "wst_core.iam.auth.SessionUserAuthentication"
    name = "SessionCookie"

    def get_security_definition(self, auto_schema):
        return {
            "type": "apiKey",
            "in": "cookie",
            "name": "wst.session",
            "description": "Server-side session cookie set by POST /api/auth/login.",
        }
