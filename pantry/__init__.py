import logging

from flask import Flask, jsonify

from .config import Config
from .extensions import db, cors, migrate

log = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_class)
    config_class.init_app(app)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Init extensions
    db.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})
    migrate.init_app(app, db)

    from .errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from .product import bp as product_bp; app.register_blueprint(product_bp)
    from .customer import bp as customer_bp; app.register_blueprint(customer_bp)
    from .order import bp as order_bp; app.register_blueprint(order_bp)
    from .checkout import bp as checkout_bp; app.register_blueprint(checkout_bp)
    from .sales import bp as sales_bp; app.register_blueprint(sales_bp)
    from .payment import bp as payment_bp; app.register_blueprint(payment_bp)

    from .cli import register_cli
    register_cli(app)

    @app.get("/")
    def health():
        return jsonify(ok=True, msg="API running")

    with app.app_context():
        db.create_all()
        if app.config["SEED_DEFAULT_PRODUCTS"]:
            from .services.catalog_service import seed_default_products
            seed_default_products()
        log.debug("blueprints: %s", sorted(app.blueprints.keys()))

    return app
