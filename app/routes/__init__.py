"""Routes package for the translation service."""


def register_routes(app):
    """Register all route blueprints with the application."""
    from .translate import translate_bp
    from .health import health_bp

    app.register_blueprint(translate_bp)
    app.register_blueprint(health_bp)
