"""
Ride Command Tests
==================

Ride lifecycle rules and single-step undo.
"""

import logging

import pytest


@pytest.fixture
def ride():
    """A RideService, a controller and a helper to request a standard ride."""
    from patternbook.behavioral.ride import RequestRideCommand, RideController, RideService

    service = RideService()
    controller = RideController()

    def request(ride_id="RIDE-1"):
        return controller.execute_command(
            RequestRideCommand(service, ride_id, "John Doe", "Times Square", "Central Park")
        )

    return service, controller, request


class TestRideService:
    """Receiver state transitions."""

    def test_request_then_confirm(self):
        from patternbook.behavioral.ride import RideService, RideStatus

        service = RideService()
        service.request_ride("R1", "Jane", "A", "B")
        assert service.status is RideStatus.REQUESTED

        message = service.confirm_ride("Mike")
        assert service.status is RideStatus.CONFIRMED
        assert service.driver == "Mike"
        assert "Mike" in message

    def test_confirm_requires_requested(self, caplog):
        from patternbook.behavioral.ride import RideService

        service = RideService()
        with caplog.at_level(logging.WARNING, logger="patternbook.behavioral.ride"):
            message = service.confirm_ride("Mike")

        assert message == "Cannot confirm ride. Current status: NONE"
        assert service.status is None
        assert service.driver is None
        assert "Cannot confirm" in caplog.text

    def test_confirm_twice_rejected(self):
        from patternbook.behavioral.ride import RideService, RideStatus

        service = RideService()
        service.request_ride("R1", "Jane", "A", "B")
        service.confirm_ride("Mike")
        service.confirm_ride("Other")
        assert service.driver == "Mike"
        assert service.status is RideStatus.CONFIRMED

    def test_cancel_clears_driver(self):
        from patternbook.behavioral.ride import RideService, RideStatus

        service = RideService()
        service.request_ride("R1", "Jane", "A", "B")
        service.confirm_ride("Mike")
        service.cancel_ride()
        assert service.status is RideStatus.CANCELLED
        assert service.driver is None

    def test_cancel_completed_rejected(self):
        from patternbook.behavioral.ride import RideService, RideStatus

        service = RideService()
        service.request_ride("R1", "Jane", "A", "B")
        service.confirm_ride("Mike")
        service.complete_ride()

        assert service.cancel_ride().startswith("Cannot cancel")
        assert service.status is RideStatus.COMPLETED

    def test_delete_wipes_ride(self):
        from patternbook.behavioral.ride import RideService, RideStatus

        service = RideService()
        service.request_ride("R1", "Jane", "A", "B")
        service.delete_ride()
        assert service.status is RideStatus.DELETED
        assert service.ride_id is None
        assert service.passenger is None
        assert service.cancel_ride().startswith("Cannot cancel")

    def test_ride_info(self):
        from patternbook.behavioral.ride import RideService

        service = RideService()
        service.request_ride("R1", "Jane", "A", "B")
        assert service.get_ride_info() == "Ride[ID=R1, Passenger=Jane, Driver=None, Status=REQUESTED]"


class TestRideController:
    """Invoker history and undo."""

    def test_command_names(self):
        from patternbook.behavioral.ride import (
            CancelRideCommand,
            ConfirmRideCommand,
            DeleteRideCommand,
            RequestRideCommand,
        )

        assert RequestRideCommand.name == "REQUEST_RIDE"
        assert ConfirmRideCommand.name == "CONFIRM_RIDE"
        assert CancelRideCommand.name == "CANCEL_RIDE"
        assert DeleteRideCommand.name == "DELETE_RIDE"

    def test_undo_confirm_restores_requested(self, ride):
        from patternbook.behavioral.ride import ConfirmRideCommand, RideStatus

        service, controller, request = ride
        request()
        controller.execute_command(ConfirmRideCommand(service, "Mike"))

        controller.undo_last_command()
        assert service.status is RideStatus.REQUESTED
        assert service.driver is None
        assert service.ride_id == "RIDE-1"

    def test_undo_steps_back_one_command_at_a_time(self, ride):
        from patternbook.behavioral.ride import ConfirmRideCommand, RideStatus

        service, controller, request = ride
        request("RIDE-1")
        request("RIDE-2")
        controller.execute_command(ConfirmRideCommand(service, "Mike"))

        controller.undo_last_command()
        assert service.ride_id == "RIDE-2"
        assert service.status is RideStatus.REQUESTED

        controller.undo_last_command()
        assert service.ride_id == "RIDE-1"
        assert service.status is RideStatus.REQUESTED

        controller.undo_last_command()
        assert service.ride_id is None
        assert service.status is None
        assert controller.history == []

    def test_same_command_executed_twice_undoes_each_execution(self):
        from patternbook.behavioral.ride import (
            ConfirmRideCommand,
            RequestRideCommand,
            RideController,
            RideService,
            RideStatus,
        )

        service = RideService()
        controller = RideController()
        request = RequestRideCommand(service, "RIDE-1", "John Doe", "A", "B")

        controller.execute_command(request)
        controller.execute_command(ConfirmRideCommand(service, "Mike"))
        controller.execute_command(request)
        assert service.status is RideStatus.REQUESTED
        assert service.driver is None

        controller.undo_last_command()
        assert service.status is RideStatus.CONFIRMED
        assert service.driver == "Mike"

        controller.undo_last_command()
        assert service.status is RideStatus.REQUESTED

        controller.undo_last_command()
        assert service.status is None
        assert controller.undo_last_command() is None

    def test_undo_with_no_history_returns_none(self):
        from patternbook.behavioral.ride import RideController

        assert RideController().undo_last_command() is None

    @pytest.mark.parametrize("command_name", ["CancelRideCommand", "DeleteRideCommand"])
    def test_final_commands_cannot_be_undone(self, ride, command_name):
        from patternbook.behavioral import ride as ride_module
        from patternbook.errors import UndoNotSupportedError

        service, controller, request = ride
        request()
        controller.execute_command(getattr(ride_module, command_name)(service))
        status = service.status

        with pytest.raises(UndoNotSupportedError):
            controller.undo_last_command()

        assert service.status is status
        assert len(controller.history) == 2

    def test_demo_runs_without_delay(self, settings, capsys):
        from patternbook.behavioral.ride import main

        main(settings)
        out = capsys.readouterr().out
        assert "CANCEL_RIDE cannot be undone" in out
        assert "Status=DELETED" in out
