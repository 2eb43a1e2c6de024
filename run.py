# run.py
# This is the main entry point for the application.
# To start the server, run 'python run.py' in your terminal.

from app import create_app

# Create an instance of the Flask application using our factory function
# defined in app/__init__.py.
app = create_app()

if __name__ == '__main__':
    host, port = app.config["HOST"], app.config["PORT"]
    app.logger.info(f"Starting server at http://{host}:{port}")
    # debug=True enables auto-reloading and detailed error pages.
    app.run(host=host, port=port, debug=app.config["DEBUG"])
