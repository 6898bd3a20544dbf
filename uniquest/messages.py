# Fixed player-facing strings.
GAME_STARTED = "Игра начата"
GAME_FINISHED = "Завершение игры..."
ECHO = "Было введено: {line}"

UNKNOWN_COMMAND = "неизвестная команда"
WRONG_ARITY = "неверное количество аргументов для команды '{action}'"

EXITS_PREFIX = "можно пройти"
GOALS_CONJUNCTION = " и "

NO_PATH = "нет пути в {destination}"
WORN = "вы надели: {name}"
NOTHING_TO_WEAR = "нечего надеть"
NOWHERE_TO_PUT = "некуда класть"
TAKEN = "предмет добавлен в инвентарь: {name}"
NO_SUCH_THING = "нет такого"
NOTHING_TO_APPLY_TO = "не к чему применить"
NOT_IN_INVENTORY = "нет предмета в инвентаре - {name}"
