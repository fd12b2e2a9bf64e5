import logging

from checkout_api import create_app

logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = create_app()
