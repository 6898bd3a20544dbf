from uniquest import messages
from uniquest.goals import outstanding


class Narrator:
    """
    The Narrator writes the room description. It reads state, never changes it.

    Two variants:
      look  -> on_look text, container contents, outstanding goals, exits
      enter -> on_enter text, exits
    """

    def describe(self, room, entering=False):
        sentence = ", ".join(self._clauses(room, entering))
        exits = self.exits_clause(room)
        return ". ".join(part for part in (sentence, exits) if part)

    def _clauses(self, room, entering):
        # --- 1. AMBIENT TEXT ---
        ambient = room.text.on_enter if entering else room.text.on_look
        if ambient:
            yield ambient

        if entering:
            return

        # --- 2. CONTAINERS ---
        if room.containers:
            contents = self.contents_clause(room)
            if contents:
                yield contents

        # --- 3. GOALS ---
        # Emitted whenever the room owns goals, even once all are achieved.
        if room.goals:
            goals = messages.GOALS_CONJUNCTION.join(outstanding(room))
            yield f"{room.text.goal_prefix} {goals}"

    def contents_clause(self, room):
        listed = []
        for container in room.containers:
            if container.items:
                names = ", ".join(item.name for item in container.items)
                listed.append(f"{container.label}: {names}")

        if not listed:
            return room.text.empty_msg
        return ", ".join(listed)

    def exits_clause(self, room):
        """Exits in the same area are shown by name, others by their area tag."""
        if not room.exits:
            return ""

        labels = []
        for passage in room.exits:
            if passage.text.area == room.text.area:
                labels.append(passage.name)
            else:
                labels.append(passage.text.area)
        return f"{messages.EXITS_PREFIX} - {', '.join(labels)}"
