# Sample Trivia Bank - offline categories and clues
# Serves the same two calls as the remote API so a board can be played without a network

from errors import TriviaServiceError

CATEGORIES = [
    {
        "id": 101,
        "title": "UK Prime Ministers",
        "clues": [
            {"question": "First female Prime Minister of the UK", "answer": "Margaret Thatcher"},
            {"question": "Led the Labour landslide of 1997", "answer": "Tony Blair"},
            {"question": "Shortest-serving PM, in office for 49 days", "answer": "Liz Truss"},
            {"question": "Called the 2016 Brexit referendum", "answer": "David Cameron"},
            {"question": "PM who succeeded Thatcher in 1990", "answer": "John Major"},
            {"question": "Wartime leader who said 'we shall fight on the beaches'", "answer": "Winston Churchill"},
        ],
    },
    {
        "id": 102,
        "title": "London Underground",
        "clues": [
            {"question": "Line drawn in yellow on the Tube map", "answer": "Circle"},
            {"question": "The newest line, opened in 2022", "answer": "Elizabeth"},
            {"question": "World's first underground railway line, opened 1863", "answer": "Metropolitan"},
            {"question": "Line whose name joins Baker Street and Waterloo", "answer": "Bakerloo"},
            {"question": "Line named after a queen's diamond anniversary", "answer": "Jubilee"},
        ],
    },
    {
        "id": 103,
        "title": "Chemical Elements",
        "clues": [
            {"question": "Element with the symbol Fe", "answer": "Iron"},
            {"question": "The lightest element", "answer": "Hydrogen"},
            {"question": "Noble gas used in bright red signs", "answer": "Neon"},
            {"question": "Element with atomic number 79", "answer": "Gold"},
            {"question": "Liquid metal at room temperature", "answer": "Mercury"},
            {"question": "Element named after Marie Curie's homeland", "answer": "Polonium"},
        ],
    },
    {
        "id": 104,
        "title": "Shakespeare Plays",
        "clues": [
            {"question": "Play in which a prince asks 'to be, or not to be'", "answer": "Hamlet"},
            {"question": "Star-crossed lovers of Verona", "answer": "Romeo and Juliet"},
            {"question": "Scottish play the superstitious won't name", "answer": "Macbeth"},
            {"question": "Play featuring Prospero and Caliban", "answer": "The Tempest"},
            {"question": "King who divides his realm among three daughters", "answer": "King Lear"},
        ],
    },
    {
        "id": 105,
        "title": "Planets",
        "clues": [
            {"question": "Planet closest to the Sun", "answer": "Mercury"},
            {"question": "Known as the Red Planet", "answer": "Mars"},
            {"question": "Largest planet in the solar system", "answer": "Jupiter"},
            {"question": "Planet with the most prominent rings", "answer": "Saturn"},
            {"question": "Planet that rotates on its side", "answer": "Uranus"},
        ],
    },
    {
        "id": 106,
        "title": "World Capitals",
        "clues": [
            {"question": "Capital of Australia", "answer": "Canberra"},
            {"question": "Capital of Canada", "answer": "Ottawa"},
            {"question": "City on the Bosphorus that is NOT Turkey's capital", "answer": "Istanbul"},
            {"question": "Capital of New Zealand", "answer": "Wellington"},
            {"question": "Highest capital city in the world", "answer": "La Paz"},
            {"question": "Capital of Kenya", "answer": "Nairobi"},
        ],
    },
    {
        "id": 107,
        "title": "Famous Painters",
        "clues": [
            {"question": "Painted 'The Starry Night'", "answer": "Vincent van Gogh"},
            {"question": "Painted the ceiling of the Sistine Chapel", "answer": "Michelangelo"},
            {"question": "Co-founded Cubism with Georges Braque", "answer": "Pablo Picasso"},
            {"question": "Painted 'The Persistence of Memory'", "answer": "Salvador Dali"},
            {"question": "Painted a series of water lilies at Giverny", "answer": "Claude Monet"},
        ],
    },
    {
        "id": 108,
        "title": "Olympic Sports",
        "clues": [
            {"question": "Sport of epee, foil and sabre", "answer": "Fencing"},
            {"question": "Event combining cross-country skiing and rifle shooting", "answer": "Biathlon"},
            {"question": "Sport played with stones and brooms on ice", "answer": "Curling"},
            {"question": "Ten-event track and field contest", "answer": "Decathlon"},
            {"question": "Martial art meaning 'gentle way'", "answer": "Judo"},
        ],
    },
]


class SampleTriviaSource:
    """In-process stand-in for the trivia API, backed by CATEGORIES."""

    def __init__(self, categories=None):
        self.categories = categories if categories is not None else CATEGORIES
        self._by_id = {c["id"]: c for c in self.categories}

    def list_categories(self, count, offset):
        """Return `count` consecutive categories starting at `offset`, wrapping around."""
        total = len(self.categories)
        if total == 0:
            return []
        start = offset % total
        picked = [self.categories[(start + i) % total] for i in range(min(count, total))]
        return [
            {"id": c["id"], "title": c["title"], "clues_count": len(c["clues"])}
            for c in picked
        ]

    def get_category(self, category_id, offset):
        category = self._by_id.get(category_id)
        if category is None:
            raise TriviaServiceError(f"No sample category {category_id}")
        clues = list(category["clues"])
        if clues:
            # Rotate so different offsets surface different clues first
            shift = offset % len(clues)
            clues = clues[shift:] + clues[:shift]
        return {"id": category["id"], "title": category["title"], "clues": clues}

