"""
School Clearance Application Factory
Department clearance workflow on Flask
"""

import os
from flask import Flask
from flask_cors import CORS
from school_clearance.models import db, SQLAlchemyRecordStore
from school_clearance.routes import auth_bp, clearance_bp, student_clearance_bp, register_error_handlers
from school_clearance.services import ClearanceService
from school_clearance.utils import setup_logging, log_info, log_warning


def create_app(config_name: str = None) -> Flask:
    """
    Application factory
    
    Args:
        config_name: Configuration name (development, production, testing)
        
    Returns:
        Flask application instance
    """
    app = Flask(__name__)
    
    # Load configuration
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')
    
    # Import and set configuration
    from config import config
    config_class = config.get(config_name, config['default'])
    app.config.from_object(config_class)
    config_class.init_app(app)
    
    # Initialize extensions
    db.init_app(app)
    CORS(app, supports_credentials=True)
    app.extensions['clearance_service'] = ClearanceService(SQLAlchemyRecordStore(db))
    
    # Setup logging
    with app.app_context():
        setup_logging()
        log_info("Application initialized")
    
    # Register blueprints
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(clearance_bp, url_prefix='/api')
    app.register_blueprint(student_clearance_bp, url_prefix='/api')
    register_error_handlers(app)
    
    # Create database tables
    with app.app_context():
        try:
            db.create_all()
            log_info("Database tables created successfully")
        except Exception as e:
            log_warning(f"Database initialization warning: {e}")
    
    return app
