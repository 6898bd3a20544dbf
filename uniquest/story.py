# Story data. Built into a World by world.build_world().
GAME_DATA = {
    'title': 'Утро студента',
    'start_room': 'кухня',
    'rooms': [
        {
            'name': 'кухня',
            'text': {
                'on_look': 'ты находишься на кухне',
                'on_enter': 'кухня, ничего интересного',
                'goal_prefix': 'надо',
                'area': 'домой',
            },
            'containers': [
                {'label': 'на столе', 'items': [{'name': 'чай', 'kind': 'generic'}]},
            ],
            'exits': ['коридор'],
            'goals': [
                {'kind': 'collect_items', 'title': 'собрать рюкзак', 'items': ['ключи', 'конспекты']},
                {'kind': 'reach_room', 'title': 'идти в универ', 'room': 'улица', 'requires': 'собрать рюкзак'},
            ],
        },
        {
            'name': 'коридор',
            'text': {
                'on_enter': 'ничего интересного',
                'area': 'домой',
            },
            'exits': ['кухня', 'комната', 'улица'],
        },
        {
            'name': 'комната',
            'text': {
                'on_enter': 'ты в своей комнате',
                'area': 'домой',
                'empty_msg': 'пустая комната',
            },
            'containers': [
                {'label': 'на столе', 'items': [
                    {'name': 'ключи', 'kind': 'key'},
                    {'name': 'конспекты', 'kind': 'generic'},
                ]},
                {'label': 'на стуле', 'items': [{'name': 'рюкзак', 'kind': 'wearable'}]},
            ],
            'exits': ['коридор'],
        },
        {
            'name': 'улица',
            'text': {
                'on_enter': 'на улице весна',
                'key_kind': 'key',
                'locked_msg': 'дверь закрыта',
                'unlocked_msg': 'дверь открыта',
                'area': 'улица',
            },
            'exits': ['коридор'],
            'locked': True,
        },
    ],
}
