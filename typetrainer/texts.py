"""Built-in practice texts, language names and keyboard layouts."""

DEFAULT_TEXTS = (
    "The sun rises every morning awakening the world with its beautiful light nature comes alive with colors and sounds birds chirp and flowers bloom in harmony",
    "الشمس تشرق في الصباح وتضيء السماء باللون الأزرق الطيور تغرد والأشجار تتمايل مع النسيم الأصدقاء يجتمعون في الحديقة للعب والاستمتاع بالوقت الممتع",
    "Вясна прынесла новыя надзеі дзяўчаты гуляюць у парку людзі займаюцца спортам ўся прырода напаўняецца жыццём і радасцю сонца свеціць ярка над зямлёй",
    "El cielo azul brilla sobre la ciudad llena de vida los niños juegan en el parque mientras las flores florecen y los pájaros cantan felices por la mañana",
    "La primavera è una stagione meravigliosa con fiori colorati che sbocciano gli uccelli cantano e il sole riscalda laria creando unatmosfera di gioia e rinascita",
    "Die Sonne scheint heute hell am Himmel Kinder spielen im Park Vögel singen fröhlich die Blumen blühen bunt und die Luft riecht nach Frühling",
    "W moim mieście znajduje się piękny park gdzie można spacerować biegać i odpoczywać wśród drzew oraz cieszyć się świeżym powietrzem z przyjaciółmi podczas pikniku",
    "A natureza é incrível cheia de cores e sons podemos explorar florestas montanhas e rios cada lugar tem sua beleza única que nos encanta sempre",
    "Солнце светит ярко на небе птицы поют в траве щебечут цветы распускаются весной наступает радость жизни и счастье наполняет сердца людей и животных",
    "Les chats sont des animaux fascinants ils aiment jouer courir et explorer leur environnement ils sont aussi très affectueux et apportent de la joie à leurs propriétaires",
    "",
)

LANGUAGE_NAMES = (
    "Английский",
    "Арабский",
    "Белорусский",
    "Испанский",
    "Итальянский",
    "Немецкий",
    "Польский",
    "Португальский",
    "Русский",
    "Французский",
)

LAYOUTS = ("us", "ara", "by", "es", "it", "de", "pl", "pt", "ru", "fr")


def _checked(items, index):
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range")
    return items[index]


def default_text(index):
    """Return the built-in practice text with the given index."""
    return _checked(DEFAULT_TEXTS, index)


def language_names():
    """Return the names of the languages offered for practice."""
    return list(LANGUAGE_NAMES)


def layout_for(index):
    """Return the keyboard layout name for the language with the given index."""
    return _checked(LAYOUTS, index)