import logging

from uniquest import messages
from uniquest.goals import evaluate_goals
from uniquest.listener import Listener
from uniquest.narrator import Narrator
from uniquest.world import ItemKind

log = logging.getLogger(__name__)

TAKEABLE = (ItemKind.GENERIC, ItemKind.KEY)
WEARABLE = (ItemKind.WEARABLE,)


class Director:
    def __init__(self, session, listener=None, narrator=None):
        """
        The Director is the STATE MACHINE.
        It mutates the session and hands back result dicts; the Narrator
        supplies any room text.
        """
        self.session = session
        self.listener = listener or Listener()
        self.narrator = narrator or Narrator()

    # ==========================================================
    # 1. THE ROUTER
    # ==========================================================
    def handle(self, line):
        """One input line in, one response string out."""
        return self.execute(line)['message']

    def execute(self, line):
        """
        Master Router: raw line -> goal check -> handler.
        Goals are re-checked first, even for unknown or malformed commands.
        """
        evaluate_goals(self.session)

        command = self.listener.parse(line)
        action = command.action

        if action == "осмотреться":
            result = self.look(command)
        elif action == "идти":
            result = self.go(command)
        elif action == "надеть":
            result = self.wear(command)
        elif action == "взять":
            result = self.take(command)
        elif action == "применить":
            result = self.apply(command)
        else:
            result = self._return_error("unknown_command", messages.UNKNOWN_COMMAND)

        log.debug("%r -> %s", line, result['status'])
        return result

    # ==========================================================
    # 2. LOOK
    # ==========================================================
    def look(self, command):
        room = self.session.location
        return self._return_success("look", self.narrator.describe(room))

    # ==========================================================
    # 3. THE SCENE SHIFTER
    # ==========================================================
    def go(self, command):
        if command.arity != 2:
            return self._usage_error("идти")

        destination = command.operands[0]
        current = self.session.location

        for passage in current.exits:
            # A locked exit stops the scan even when it is not the one asked for.
            if passage.is_locked:
                return self._return_error("locked", passage.text.locked_msg)

            if destination == passage.name or destination == passage.text.area:
                self.session.player.location = passage
                log.debug("moved %s -> %s", current.name, passage.name)
                return self._return_success(
                    "scene_change", self.narrator.describe(passage, entering=True))

        return self._return_error("lookup_miss", messages.NO_PATH.format(destination=destination))

    # ==========================================================
    # 4. THE INVENTORY MANAGER
    # ==========================================================
    def wear(self, command):
        if command.arity != 2:
            return self._usage_error("надеть")

        name = command.operands[0]
        item = self._remove_from_room(name, WEARABLE)
        if item is None:
            return self._return_error("lookup_miss", messages.NOTHING_TO_WEAR)

        # The worn item is gone for good; only the flag remains.
        self.session.player.inventory.is_worn = True
        return self._return_success("wear", messages.WORN.format(name=item.name))

    def take(self, command):
        if command.arity != 2:
            return self._usage_error("взять")

        inventory = self.session.player.inventory
        if not inventory.is_worn:
            return self._return_error("lookup_miss", messages.NOWHERE_TO_PUT)

        item = self._remove_from_room(command.operands[0], TAKEABLE)
        if item is None:
            return self._return_error("lookup_miss", messages.NO_SUCH_THING)

        inventory.items.append(item)
        return self._return_success("inventory_add", messages.TAKEN.format(name=item.name))

    def apply(self, command):
        # The second operand is accepted but does not pick the target.
        if command.arity != 3:
            return self._usage_error("применить")

        name = command.operands[0]
        item = self.session.player.inventory.get(name)
        if item is None:
            return self._return_error("lookup_miss", messages.NOT_IN_INVENTORY.format(name=name))

        for passage in self.session.location.exits:
            if passage.is_locked and passage.text.key_kind == item.kind:
                passage.is_locked = False
                log.debug("unlocked %s with %s", passage.name, item.name)
                return self._return_success("unlock", passage.text.unlocked_msg)

        return self._return_error("lookup_miss", messages.NOTHING_TO_APPLY_TO)

    # ==========================================================
    # 5. INTERNAL HELPERS
    # ==========================================================
    def _remove_from_room(self, name, kinds):
        """Pops the first matching item from the current room's containers."""
        for container in self.session.location.containers:
            idx = container.find(name, kinds)
            if idx is not None:
                return container.items.pop(idx)
        return None

    def _usage_error(self, action):
        return self._return_error("usage_error", messages.WRONG_ARITY.format(action=action))

    def _return_success(self, event_type, message):
        return {"event_type": event_type, "status": "SUCCESS", "reason": None, "message": message}

    def _return_error(self, reason, message):
        return {"event_type": "error", "status": "FAILURE", "reason": reason, "message": message}
