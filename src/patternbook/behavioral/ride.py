"""
Ride Commands
=============

Command pattern with undo, applied to a ride-hailing flow.

The RideService receiver moves a ride through a small lifecycle:

    (none) -> REQUESTED -> CONFIRMED -> COMPLETED
                   \\            \\
                    -> CANCELLED <-
    any state -> DELETED

The controller snapshots the receiver before every execution, so undo
restores exactly what the last execution changed and nothing earlier.
The same command instance may be executed repeatedly. Cancel and
delete are final and refuse to be undone.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from patternbook.config import Settings
from patternbook.errors import UndoNotSupportedError


logger = logging.getLogger(__name__)


class RideStatus(str, Enum):
    """Lifecycle states of a ride."""

    REQUESTED = "REQUESTED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    DELETED = "DELETED"


@dataclass(frozen=True)
class RideSnapshot:
    """Receiver state captured before a command runs."""

    ride_id: Optional[str]
    passenger: Optional[str]
    driver: Optional[str]
    pickup: Optional[str]
    destination: Optional[str]
    status: Optional[RideStatus]


class RideService:
    """
    Receiver: performs the actual ride operations.

    Attributes:
        status: Current ride status, None before any request
    """

    def __init__(self) -> None:
        self.ride_id: Optional[str] = None
        self.passenger: Optional[str] = None
        self.driver: Optional[str] = None
        self.pickup: Optional[str] = None
        self.destination: Optional[str] = None
        self.status: Optional[RideStatus] = None

    def request_ride(self, ride_id: str, passenger: str, pickup: str, destination: str) -> str:
        self.ride_id = ride_id
        self.passenger = passenger
        self.driver = None
        self.pickup = pickup
        self.destination = destination
        self.status = RideStatus.REQUESTED
        return f"Ride {ride_id} requested by {passenger}: {pickup} -> {destination}. Searching for nearby drivers..."

    def confirm_ride(self, driver: str) -> str:
        if self.status != RideStatus.REQUESTED:
            logger.warning(f"Cannot confirm ride {self.ride_id} in status {self._status_name}")
            return f"Cannot confirm ride. Current status: {self._status_name}"

        self.driver = driver
        self.status = RideStatus.CONFIRMED
        return f"Ride {self.ride_id} confirmed: {driver} accepted your ride. Driver is on the way!"

    def complete_ride(self) -> str:
        if self.status != RideStatus.CONFIRMED:
            logger.warning(f"Cannot complete ride {self.ride_id} in status {self._status_name}")
            return f"Cannot complete ride. Current status: {self._status_name}"

        self.status = RideStatus.COMPLETED
        return f"Ride {self.ride_id} completed"

    def cancel_ride(self) -> str:
        if self.status in (None, RideStatus.COMPLETED, RideStatus.DELETED):
            logger.warning(f"Cannot cancel ride {self.ride_id} in status {self._status_name}")
            return f"Cannot cancel. Current status: {self._status_name}"

        previous = self.status
        self.status = RideStatus.CANCELLED
        self.driver = None
        return f"Ride {self.ride_id} cancelled (was {previous.value}). Refund will be processed if applicable"

    def delete_ride(self) -> str:
        ride_id = self.ride_id
        self.ride_id = None
        self.passenger = None
        self.driver = None
        self.pickup = None
        self.destination = None
        self.status = RideStatus.DELETED
        return f"Ride {ride_id} deleted. Ride data has been permanently removed"

    def get_ride_info(self) -> str:
        return (
            f"Ride[ID={self.ride_id}, Passenger={self.passenger}, "
            f"Driver={self.driver}, Status={self._status_name}]"
        )

    def snapshot(self) -> RideSnapshot:
        return RideSnapshot(
            ride_id=self.ride_id,
            passenger=self.passenger,
            driver=self.driver,
            pickup=self.pickup,
            destination=self.destination,
            status=self.status,
        )

    def restore(self, snapshot: RideSnapshot) -> None:
        self.ride_id = snapshot.ride_id
        self.passenger = snapshot.passenger
        self.driver = snapshot.driver
        self.pickup = snapshot.pickup
        self.destination = snapshot.destination
        self.status = snapshot.status

    @property
    def _status_name(self) -> str:
        return self.status.value if self.status else "NONE"


# =============================================================================
# Commands
# =============================================================================

class RideCommand:
    """
    Base ride command.

    Subclasses implement _run(). Commands keep no per-execution state,
    so one instance may be executed any number of times; the invoker
    keeps the snapshot for each execution and hands it to undo().
    """

    name = "RIDE_COMMAND"
    reversible = True

    def __init__(self, ride_service: RideService) -> None:
        self.ride_service = ride_service

    def _run(self) -> str:
        raise NotImplementedError

    def execute(self) -> str:
        return self._run()

    def undo(self, before: RideSnapshot) -> str:
        """
        Restore the receiver to the state captured before one execution.

        Raises:
            UndoNotSupportedError: If this command is final.
        """
        if not self.reversible:
            raise UndoNotSupportedError(f"{self.name} cannot be undone")

        self.ride_service.restore(before)
        return f"Undid {self.name}: {self.ride_service.get_ride_info()}"


class RequestRideCommand(RideCommand):
    name = "REQUEST_RIDE"

    def __init__(self, ride_service: RideService, ride_id: str, passenger: str, pickup: str, destination: str) -> None:
        super().__init__(ride_service)
        self.ride_id = ride_id
        self.passenger = passenger
        self.pickup = pickup
        self.destination = destination

    def _run(self) -> str:
        return self.ride_service.request_ride(self.ride_id, self.passenger, self.pickup, self.destination)


class ConfirmRideCommand(RideCommand):
    name = "CONFIRM_RIDE"

    def __init__(self, ride_service: RideService, driver: str) -> None:
        super().__init__(ride_service)
        self.driver = driver

    def _run(self) -> str:
        return self.ride_service.confirm_ride(self.driver)


class CancelRideCommand(RideCommand):
    name = "CANCEL_RIDE"
    reversible = False

    def _run(self) -> str:
        return self.ride_service.cancel_ride()


class DeleteRideCommand(RideCommand):
    name = "DELETE_RIDE"
    reversible = False

    def _run(self) -> str:
        return self.ride_service.delete_ride()


class RideController:
    """
    Invoker: executes ride commands and remembers them for undo.

    Attributes:
        history: (command, receiver snapshot taken before it ran) for
            every execution, most recent last
    """

    def __init__(self) -> None:
        self.history: List[Tuple[RideCommand, RideSnapshot]] = []

    def execute_command(self, command: RideCommand) -> str:
        logger.info(f"Executing: {command.name}")
        before = command.ride_service.snapshot()
        result = command.execute()
        self.history.append((command, before))
        return result

    def undo_last_command(self) -> Optional[str]:
        """
        Undo the most recent command.

        Returns:
            Description of the undo, or None if there is nothing to undo.

        Raises:
            UndoNotSupportedError: If the most recent command is final.
                It stays in the history.
        """
        if not self.history:
            logger.info("No command to undo")
            return None

        command, before = self.history[-1]
        logger.info(f"Undoing: {command.name}")
        result = command.undo(before)
        self.history.pop()
        return result


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings()
    delay = settings.demos.ride_step_delay_seconds

    service = RideService()
    controller = RideController()

    def run(command: RideCommand) -> None:
        print(f"==> {command.name}")
        print(f"    {controller.execute_command(command)}")
        time.sleep(delay)

    run(RequestRideCommand(service, "RIDE-12345", "John Doe", "Times Square, NYC", "Central Park, NYC"))
    run(ConfirmRideCommand(service, "Mike Wilson (4.8)"))

    print("Passenger changed their mind...")
    print(f"    {controller.undo_last_command()}")

    run(RequestRideCommand(service, "RIDE-12346", "Jane Smith", "Brooklyn Bridge", "JFK Airport"))
    run(ConfirmRideCommand(service, "Sarah Johnson (4.9)"))

    print("Emergency! Passenger needs to cancel...")
    run(CancelRideCommand(service))
    try:
        controller.undo_last_command()
    except UndoNotSupportedError as e:
        print(f"    {e}")

    run(DeleteRideCommand(service))
    print(service.get_ride_info())


if __name__ == "__main__":
    main()
