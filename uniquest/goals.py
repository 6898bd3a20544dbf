import logging

from uniquest.world import GoalKind

log = logging.getLogger(__name__)


def evaluate_goals(session):
    """
    Re-checks every goal in the world, room by room in declaration order.
    Runs before each command, wherever the player is. Flags only ever flip
    to True; a later goal may read an earlier sibling's flag.
    """
    for room in session.world.rooms.values():
        for goal in room.goals:
            if goal.is_achieved:
                continue
            check = _CHECKS[goal.kind]
            if check(goal, session, room):
                goal.is_achieved = True
                log.debug("goal achieved: %s (%s)", goal.title, room.name)


def outstanding(room):
    return [goal.title for goal in room.goals if not goal.is_achieved]


def _check_collect_items(goal, session, owner):
    inventory = session.player.inventory
    return all(inventory.holds(name) for name in goal.items)


def _check_reach_room(goal, session, owner):
    if goal.requires:
        prerequisite = owner.goal(goal.requires)
        if prerequisite is None or not prerequisite.is_achieved:
            return False
    return session.location.name == goal.room


_CHECKS = {
    GoalKind.COLLECT_ITEMS: _check_collect_items,
    GoalKind.REACH_ROOM: _check_reach_room,
}
