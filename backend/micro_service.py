from flask import Flask
from flask_cors import CORS
import logging
import os

GREETING = "Hello world!"


def get_host():
    return os.environ.get('HOST', '0.0.0.0')


def get_port():
    """Listen port from the PORT env var; raises ValueError if it isn't an integer"""
    return int(os.environ.get('PORT', '8080'))


def get_log_level():
    return os.environ.get('LOG_LEVEL', 'INFO').upper()


app = Flask(__name__)
CORS(app)  # Enable CORS for frontend communication

# Configure logging
logging.basicConfig(
    level=get_log_level(),
    format='%(asctime)s %(levelname)s %(name)s : %(message)s'
)
logger = logging.getLogger(__name__)


@app.route('/hello-world', methods=['GET'])
def handle_greeting():
    """Log the greeting and return it as plain text"""
    logger.info(GREETING)
    return GREETING, 200, {'Content-Type': 'text/plain; charset=utf-8'}


def main():
    app.run(host=get_host(), port=get_port(), debug=False)


if __name__ == '__main__':
    main()
