import click
from flask import Blueprint, current_app

from ..exceptions import (
    InvalidVehicleConfigError,
    UnknownFeatureError,
    UnknownStrategyError,
    UnknownVehicleKindError,
)
from ..services.showroom_service import ShowroomService

bp = Blueprint("showroom", __name__, cli_group="showroom")


@bp.cli.command("demo")
def demo():
    """Run the vehicle showroom demonstration once."""
    try:
        fleet = ShowroomService.build_fleet(current_app.config["SHOWROOM_FLEET"])
    except (InvalidVehicleConfigError, UnknownStrategyError,
            UnknownVehicleKindError, UnknownFeatureError) as e:
        raise click.ClickException(e.message)
    ShowroomService.run(fleet)
