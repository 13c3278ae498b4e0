import os

from src.shift_pay.shift_pay.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(port=int(os.getenv("PORT", "5000")), debug=app.config["DEBUG"])
