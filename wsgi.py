import os
import sys
import logging
from app import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    stream=sys.stdout,
)

app = create_app()

if __name__ == '__main__':
    # SERVER_PORT matches the container setup; PORT is what most PaaS hosts inject
    port = int(os.getenv('SERVER_PORT') or os.getenv('PORT', 8080))

    # CRITICAL: Never run debug mode in production
    debug_mode = os.getenv('FLASK_DEBUG', 'False').lower() in ('true', '1', 'yes')

    logging.getLogger(__name__).info(f"Translation service started on port {port}")
    app.run(host='0.0.0.0', port=port, debug=debug_mode, threaded=True)
