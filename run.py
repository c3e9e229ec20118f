"""Entry point for running the complaint desk web application."""

from complaint_desk import create_app

app = create_app()

if __name__ == "__main__":
    app.run()
