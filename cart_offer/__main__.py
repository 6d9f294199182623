import uvicorn

from cart_offer.config import Config


def main():
    uvicorn.run("cart_offer:app", host=Config.HOST, port=Config.PORT, log_level=Config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
