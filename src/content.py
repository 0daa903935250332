from __future__ import annotations

from telegram.models import Location

CELEBRATION_ALLOWED_USERNAMES = ("antonhulikau", "okalitova", "maffina95")

CELEBRATION_PHRASES = (
    "Твой друг: Дрюня\nНа вопрос: Что бы ты приготовил/а Маше на завтрак?\nОтветил(а): Пельмеши",
)

CELEBRATION_WELCOME_TEXT = "Привет, нажимай на кнопку получить поздравление и кайфуй!"
CELEBRATION_BUTTON_LABEL = "Получить поздравление"

TREASURE_HUNT_ALLOWED_USERNAMES = ("antonhulikau", "sonicfelidae")
TREASURE_HUNT_SUPERVISOR_CHAT_ID = 49208041
TREASURE_HUNT_SECRET_WORD = "afsio"
TREASURE_HUNT_RADIUS_METERS = 2000.0

TREASURE_HUNT_LOCATIONS = (
    Location(latitude=48.158967, longitude=11.490981),  # nymphenburg
    Location(latitude=48.155582, longitude=11.493340),  # west
    Location(latitude=48.143296, longitude=11.596526),  # ducks
    Location(latitude=48.173194, longitude=11.555078),  # olympia
    Location(latitude=48.166302, longitude=11.568141),  # luitpold
)

HUNT_START_TEXT = (
    "Присылай мне свою локацию. Если ты будешь относительно близко к расположению подсказки, "
    "я дам тебе точные координаты!\nУ меня есть так же команда /unlock =)"
)
HUNT_UNLOCK_PROMPT = "Пароль?"
HUNT_SUCCESS_TEXT = (
    "Молодец! Все верно!\n"
    "В качестве приза могли прийти, но не пришли:\n"
    "1. Поездка в Австрию на викенд. Но она почему-то вводит локдаун.\n"
    "2. Поход на Щелкунчика. Но кто-то прощелкал все полимеры =(.\n"
    "3. Карты с покемонами на испанском. Но они у тебя уже есть.\n\n\n\n"
    "Но зато пришел: бессрочный recharge day on demand. "
    "Предложение отвезти тебя, куда ты захочешь, на 1 день. Используй его, когда тебе вздумается."
)
HUNT_CHECK_PLACE_TEXT = "Проверь это место"
HUNT_NO_HINTS_TEXT = "Вблизи нет подсказок"
HUNT_WRONG_PASSWORD_TEXT = "Этот пароль не подходит =("

SUPERVISOR_STARTED_TEXT = "Соня начала искать локации!"
SUPERVISOR_SOLVED_TEXT = "Соня справилась!"
SUPERVISOR_CHECKING_TEMPLATE = "Соня проверяет {index}!"
SUPERVISOR_ATTEMPT_TEMPLATE = "Соня ввела {text}!"
