from showroom import create_app
from showroom.services.showroom_service import ShowroomService


def main():
    app = create_app()
    with app.app_context():
        ShowroomService.run_fleet(app.config["SHOWROOM_FLEET"])


if __name__ == "__main__":
    main()
