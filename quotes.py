import random
from typing import NamedTuple, Optional


class Quote(NamedTuple):
    text: str
    author: str

    def formatted(self):
        """(quote line, attribution line) as displayed"""
        return f"“{self.text}”", f"— {self.author}"


QUOTES = (
    Quote("The secret of getting ahead is getting started.", "Mark Twain"),
    Quote("It’s not whether you get knocked down, it’s whether you get up.", "Vince Lombardi"),
    Quote("The future belongs to those who believe in the beauty of their dreams.", "Eleanor Roosevelt"),
    Quote("The only way to do great work is to love what you do.", "Steve Jobs"),
    Quote("Believe you can and you're halfway there.", "Theodore Roosevelt"),
    Quote("Well done is better than well said.", "Benjamin Franklin"),
)


def pick_quote(rng: Optional[random.Random] = None) -> Quote:
    """Quote of the day, chosen uniformly at random"""
    return (rng or random).choice(QUOTES)
