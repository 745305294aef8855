# storefront/main.py
import uvicorn

from storefront.api import create_app
from storefront.utils.settings import HOST, PORT

app = create_app()


def run():
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
