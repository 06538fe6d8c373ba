# -*- coding: utf-8 -*-
"""
deck.py — Static Rider–Waite–Smith card catalog

Responsibilities:
- Define the 78-card deck (22 major + 4 suits x 14 minor) as immutable records
- Provide read-only lookups: by id, by arcana, by suit
- Provide a random, non-repeating selection driven by an injected RNG

Note:
- The catalog is built once at import time and never mutated.
- Lookups by id return None for unknown ids; callers decide the fallback.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Sequence, Tuple

from .errors import InvalidParameterError


Arcana = Literal["major", "minor"]
Suit = Literal["wands", "cups", "swords", "pentacles"]

ARCANA_VALUES: Tuple[str, ...] = ("major", "minor")
SUIT_VALUES: Tuple[str, ...] = ("wands", "cups", "swords", "pentacles")

SUIT_ELEMENTS: Dict[str, str] = {
    "wands": "Fire",
    "cups": "Water",
    "swords": "Air",
    "pentacles": "Earth",
}


@dataclass(frozen=True)
class Card:
    """Card definition (RWS)."""
    id: str              # e.g., "major-0", "cups-14"
    name: str            # e.g., "The Fool", "King of Cups"
    arcana: Arcana
    suit: Optional[Suit]  # minor arcana only
    number: Optional[int]  # major: 0..21; minor: 1 (ace) .. 14 (king)
    keywords: Tuple[str, ...]
    upright_meaning: str
    reversed_meaning: str
    element: Optional[str] = None
    astrology: Optional[str] = None

    def meaning(self, reversed: bool) -> str:
        """Interpretation text for the given orientation."""
        return self.reversed_meaning if reversed else self.upright_meaning


# =========================
# Reference data
# =========================

def _major(
    name: str,
    number: int,
    keywords: List[str],
    upright: str,
    reversed: str,
    element: Optional[str] = None,
    astrology: Optional[str] = None,
) -> Card:
    return Card(
        id=f"major-{number}",
        name=name,
        arcana="major",
        suit=None,
        number=number,
        keywords=tuple(keywords),
        upright_meaning=upright,
        reversed_meaning=reversed,
        element=element,
        astrology=astrology,
    )


def _minor(
    suit: Suit,
    number: int,
    name: str,
    keywords: List[str],
    upright: str,
    reversed: str,
) -> Card:
    return Card(
        id=f"{suit}-{number}",
        name=name,
        arcana="minor",
        suit=suit,
        number=number,
        keywords=tuple(keywords),
        upright_meaning=upright,
        reversed_meaning=reversed,
        element=SUIT_ELEMENTS[suit],
    )


MAJOR_ARCANA: Tuple[Card, ...] = (
    _major(
        name="The Fool",
        number=0,
        keywords=["beginnings", "innocence", "spontaneity", "free spirit"],
        upright="New beginnings, innocence, spontaneity, a free spirit. The Fool represents the start of a journey, unlimited potential, and taking a leap of faith into the unknown.",
        reversed="Recklessness, risk-taking, naivety. When reversed, The Fool warns against being too impulsive or ignoring important risks.",
        element="Air",
        astrology="Uranus",
    ),
    _major(
        name="The Magician",
        number=1,
        keywords=["manifestation", "resourcefulness", "power", "inspired action"],
        upright="Manifestation, resourcefulness, power, inspired action. The Magician channels the elements to create change and reminds you that you have all the tools you need.",
        reversed="Manipulation, poor planning, untapped talents. Reversed suggests wasted potential or using skills for deception.",
        element="Air",
        astrology="Mercury",
    ),
    _major(
        name="The High Priestess",
        number=2,
        keywords=["intuition", "sacred knowledge", "divine feminine", "subconscious"],
        upright="Intuition, sacred knowledge, the subconscious mind. She guards the veil between worlds and invites you to trust your inner wisdom.",
        reversed="Secrets, disconnected from intuition, withdrawal. Reversed indicates ignoring your inner voice or hidden agendas.",
        element="Water",
        astrology="Moon",
    ),
    _major(
        name="The Empress",
        number=3,
        keywords=["femininity", "beauty", "nature", "abundance"],
        upright="Femininity, beauty, nature, nurturing, abundance. The Empress represents fertility, creative expression, and connection to the natural world.",
        reversed="Creative block, dependence on others. Reversed suggests neglecting self-care or smothering behavior.",
        element="Earth",
        astrology="Venus",
    ),
    _major(
        name="The Emperor",
        number=4,
        keywords=["authority", "structure", "control", "fatherhood"],
        upright="Authority, establishment, structure, a father figure. The Emperor represents order, stability, and taking control of your domain.",
        reversed="Tyranny, rigidity, coldness. Reversed warns of excessive control or abuse of power.",
        element="Fire",
        astrology="Aries",
    ),
    _major(
        name="The Hierophant",
        number=5,
        keywords=["tradition", "conformity", "morality", "ethics"],
        upright="Spiritual wisdom, religious beliefs, conformity, tradition. The Hierophant represents established institutions and conventional approaches.",
        reversed="Personal beliefs, freedom, challenging the status quo. Reversed encourages finding your own spiritual path.",
        element="Earth",
        astrology="Taurus",
    ),
    _major(
        name="The Lovers",
        number=6,
        keywords=["love", "harmony", "relationships", "values alignment"],
        upright="Love, harmony, relationships, values alignment, choices. The Lovers represent union, attraction, and important decisions about partnerships.",
        reversed="Self-love, disharmony, imbalance. Reversed indicates relationship conflicts or fear of commitment.",
        element="Air",
        astrology="Gemini",
    ),
    _major(
        name="The Chariot",
        number=7,
        keywords=["control", "willpower", "success", "determination"],
        upright="Control, willpower, success, action, determination. The Chariot represents victory through focus and harnessing opposing forces.",
        reversed="Self-discipline lacking, opposition, no direction. Reversed warns of scattered energy or loss of control.",
        element="Water",
        astrology="Cancer",
    ),
    _major(
        name="Strength",
        number=8,
        keywords=["courage", "patience", "control", "compassion"],
        upright="Strength, courage, patience, influence, compassion. This card represents inner strength and the power of gentle persistence over brute force.",
        reversed="Inner strength lacking, self-doubt, raw emotion. Reversed suggests struggling with confidence or losing composure.",
        element="Fire",
        astrology="Leo",
    ),
    _major(
        name="The Hermit",
        number=9,
        keywords=["soul-searching", "introspection", "inner guidance", "solitude"],
        upright="Soul-searching, introspection, being alone, inner guidance. The Hermit illuminates the path of self-discovery and wisdom gained through solitude.",
        reversed="Isolation, loneliness, withdrawal. Reversed warns of excessive isolation or refusing to seek help.",
        element="Earth",
        astrology="Virgo",
    ),
    _major(
        name="Wheel of Fortune",
        number=10,
        keywords=["good luck", "karma", "life cycles", "destiny"],
        upright="Good luck, karma, life cycles, destiny, turning point. The Wheel reminds us that change is constant and fortune is always turning.",
        reversed="Bad luck, resistance to change, breaking cycles. Reversed suggests fighting against inevitable change.",
        element="Fire",
        astrology="Jupiter",
    ),
    _major(
        name="Justice",
        number=11,
        keywords=["fairness", "truth", "law", "cause and effect"],
        upright="Justice, fairness, truth, cause and effect, law. Justice represents karmic balance, legal matters, and taking responsibility.",
        reversed="Unfairness, dishonesty, unaccountability. Reversed warns of injustice or avoiding consequences.",
        element="Air",
        astrology="Libra",
    ),
    _major(
        name="The Hanged Man",
        number=12,
        keywords=["pause", "surrender", "letting go", "new perspective"],
        upright="Pause, surrender, letting go, new perspectives. The Hanged Man represents voluntary sacrifice and seeing things from a different angle.",
        reversed="Delays, resistance, stalling. Reversed suggests being stuck or refusing to see another viewpoint.",
        element="Water",
        astrology="Neptune",
    ),
    _major(
        name="Death",
        number=13,
        keywords=["endings", "change", "transformation", "transition"],
        upright="Endings, change, transformation, transition. Death represents profound transformation—the end of one chapter and the beginning of another.",
        reversed="Resistance to change, personal transformation. Reversed indicates fear of letting go or prolonging the inevitable.",
        element="Water",
        astrology="Scorpio",
    ),
    _major(
        name="Temperance",
        number=14,
        keywords=["balance", "moderation", "patience", "purpose"],
        upright="Balance, moderation, patience, purpose. Temperance represents the art of blending opposites and finding middle ground.",
        reversed="Imbalance, excess, self-healing. Reversed suggests overindulgence or lack of long-term vision.",
        element="Fire",
        astrology="Sagittarius",
    ),
    _major(
        name="The Devil",
        number=15,
        keywords=["shadow self", "attachment", "addiction", "restriction"],
        upright="Shadow self, attachment, addiction, restriction, sexuality. The Devil represents bondage to material desires and unhealthy patterns.",
        reversed="Releasing limiting beliefs, exploring dark thoughts. Reversed suggests breaking free from chains or confronting shadow.",
        element="Earth",
        astrology="Capricorn",
    ),
    _major(
        name="The Tower",
        number=16,
        keywords=["sudden change", "upheaval", "chaos", "revelation"],
        upright="Sudden change, upheaval, chaos, revelation, awakening. The Tower represents necessary destruction that clears the way for rebuilding.",
        reversed="Personal transformation, fear of change. Reversed may indicate avoiding disaster or internal upheaval.",
        element="Fire",
        astrology="Mars",
    ),
    _major(
        name="The Star",
        number=17,
        keywords=["hope", "faith", "purpose", "renewal"],
        upright="Hope, faith, purpose, renewal, spirituality. The Star represents inspiration, serenity, and healing after difficult times.",
        reversed="Lack of faith, despair, self-trust. Reversed suggests lost hope or disconnection from purpose.",
        element="Air",
        astrology="Aquarius",
    ),
    _major(
        name="The Moon",
        number=18,
        keywords=["illusion", "fear", "anxiety", "subconscious"],
        upright="Illusion, fear, anxiety, subconscious, intuition. The Moon illuminates hidden truths and the realm of dreams and shadow.",
        reversed="Release of fear, repressed emotions. Reversed suggests clarity emerging from confusion.",
        element="Water",
        astrology="Pisces",
    ),
    _major(
        name="The Sun",
        number=19,
        keywords=["positivity", "fun", "warmth", "success"],
        upright="Positivity, fun, warmth, success, vitality. The Sun represents joy, confidence, and the radiant energy of achievement.",
        reversed="Inner child, feeling down, overly optimistic. Reversed suggests temporary sadness or unrealistic expectations.",
        element="Fire",
        astrology="Sun",
    ),
    _major(
        name="Judgement",
        number=20,
        keywords=["judgement", "rebirth", "inner calling", "absolution"],
        upright="Judgement, rebirth, inner calling, absolution. Judgement represents awakening to higher purpose and making important life decisions.",
        reversed="Self-doubt, inner critic. Reversed warns of harsh self-judgment or ignoring your calling.",
        element="Fire",
        astrology="Pluto",
    ),
    _major(
        name="The World",
        number=21,
        keywords=["completion", "integration", "accomplishment", "travel"],
        upright="Completion, integration, accomplishment, travel. The World represents the successful conclusion of a major life cycle.",
        reversed="Seeking personal closure, shortcuts. Reversed suggests unfinished business or incomplete cycles.",
        element="Earth",
        astrology="Saturn",
    ),
)

# Wands (Fire), Cups (Water), Swords (Air), Pentacles (Earth)
MINOR_ARCANA: Tuple[Card, ...] = (
    _minor(
        "wands", 1, "Ace of Wands",
        ["inspiration", "new opportunities", "growth"],
        "A spark of inspiration and new creative energy enters your life. This is a time of potential and excitement.",
        "Delays in new projects, lack of direction, or creative blocks. Energy may be scattered.",
    ),
    _minor(
        "wands", 2, "Two of Wands",
        ["future planning", "progress", "decisions"],
        "Planning for the future with confidence. You hold the world in your hands and must choose your path.",
        "Fear of the unknown, lack of planning, or staying in your comfort zone.",
    ),
    _minor(
        "wands", 3, "Three of Wands",
        ["expansion", "foresight", "overseas"],
        "Your plans are taking shape. Look to the horizon—expansion and progress are coming.",
        "Delays, obstacles in your path, or frustration with slow progress.",
    ),
    _minor(
        "wands", 4, "Four of Wands",
        ["celebration", "harmony", "homecoming"],
        "A time of celebration and harmony. Enjoy the fruits of your labor with loved ones.",
        "Personal celebration needed, or tension in home or community.",
    ),
    _minor(
        "wands", 5, "Five of Wands",
        ["conflict", "competition", "tension"],
        "Healthy competition or conflict of ideas. Multiple perspectives clash but can lead to growth.",
        "Avoiding conflict, inner turmoil, or the end of competition.",
    ),
    _minor(
        "wands", 6, "Six of Wands",
        ["success", "public recognition", "victory"],
        "Victory and public recognition for your efforts. Your hard work is being acknowledged.",
        "Private achievement, fall from grace, or delayed recognition.",
    ),
    _minor(
        "wands", 7, "Seven of Wands",
        ["challenge", "competition", "perseverance"],
        "Standing your ground against challenges. Defend your position with courage.",
        "Giving up, being overwhelmed, or avoiding confrontation.",
    ),
    _minor(
        "wands", 8, "Eight of Wands",
        ["speed", "action", "movement"],
        "Rapid movement and swift action. Things are accelerating quickly.",
        "Delays, frustration, or waiting for results that seem slow in coming.",
    ),
    _minor(
        "wands", 9, "Nine of Wands",
        ["resilience", "persistence", "boundaries"],
        "You've been through challenges but remain standing. Stay vigilant and protect what you've built.",
        "Exhaustion, giving up, or paranoia about threats that may not exist.",
    ),
    _minor(
        "wands", 10, "Ten of Wands",
        ["burden", "responsibility", "hard work"],
        "Carrying heavy burdens and responsibilities. You may be taking on too much.",
        "Unable to delegate, breakdown, or learning to release burdens.",
    ),
    _minor(
        "wands", 11, "Page of Wands",
        ["inspiration", "discovery", "free spirit"],
        "A young spirit full of enthusiasm and new ideas. Be open to inspiration and adventure.",
        "Newly found passion, redirect energy, or lack of direction.",
    ),
    _minor(
        "wands", 12, "Knight of Wands",
        ["energy", "passion", "action"],
        "Passionate pursuit of goals with fiery energy. Act on your impulses but watch for recklessness.",
        "Passion without direction, haste, or scattered energy.",
    ),
    _minor(
        "wands", 13, "Queen of Wands",
        ["courage", "confidence", "independence"],
        "Confident, warm, and determined. Lead with passion and inspire others through your example.",
        "Self-respect returning, introverted, or reclaiming personal power.",
    ),
    _minor(
        "wands", 14, "King of Wands",
        ["leadership", "vision", "entrepreneur"],
        "Natural leader with vision and charisma. Take bold action and inspire others.",
        "Impulsive, overbearing, or high expectations that overwhelm.",
    ),
    _minor(
        "cups", 1, "Ace of Cups",
        ["new love", "compassion", "creativity"],
        "Emotional new beginnings. Open your heart to love, creativity, and deep feelings.",
        "Self-love needed, blocked emotions, or emotional loss.",
    ),
    _minor(
        "cups", 2, "Two of Cups",
        ["unified love", "partnership", "connection"],
        "Deep connection and partnership. Two hearts coming together in harmony.",
        "Imbalance in relationship, broken communication, or separation.",
    ),
    _minor(
        "cups", 3, "Three of Cups",
        ["celebration", "friendship", "community"],
        "Celebration with friends and community. Joy shared is joy multiplied.",
        "Independence needed, gossip, or overindulgence.",
    ),
    _minor(
        "cups", 4, "Four of Cups",
        ["meditation", "contemplation", "apathy"],
        "Turning inward, perhaps missing opportunities due to preoccupation.",
        "Awareness returning, acceptance, or moving forward.",
    ),
    _minor(
        "cups", 5, "Five of Cups",
        ["regret", "failure", "disappointment"],
        "Grief and regret over loss. But notice what remains—not all is lost.",
        "Acceptance, moving on, or finding silver linings.",
    ),
    _minor(
        "cups", 6, "Six of Cups",
        ["nostalgia", "childhood", "innocence"],
        "Sweet memories and nostalgia. Reconnecting with your inner child or past.",
        "Stuck in the past, moving forward, or unrealistic nostalgia.",
    ),
    _minor(
        "cups", 7, "Seven of Cups",
        ["opportunities", "choices", "wishful thinking"],
        "Many possibilities before you, but beware of illusions. Choose wisely.",
        "Alignment, personal values, or overwhelmed by choices.",
    ),
    _minor(
        "cups", 8, "Eight of Cups",
        ["disappointment", "abandonment", "withdrawal"],
        "Walking away from what no longer serves you. Seeking deeper meaning.",
        "Avoidance, fear of change, or trying one more time.",
    ),
    _minor(
        "cups", 9, "Nine of Cups",
        ["contentment", "satisfaction", "gratitude"],
        "The wish card—emotional fulfillment and satisfaction. Enjoy this moment.",
        "Inner happiness seeking, materialism, or dissatisfaction.",
    ),
    _minor(
        "cups", 10, "Ten of Cups",
        ["divine love", "blissful relationships", "harmony"],
        "Emotional fulfillment and happy family life. The rainbow after the storm.",
        "Disconnection, misaligned values, or broken family dynamics.",
    ),
    _minor(
        "cups", 11, "Page of Cups",
        ["creative opportunities", "intuition", "curiosity"],
        "A dreamer with creative potential. Listen to your intuition and stay curious.",
        "Emotional immaturity, creative blocks, or moody behavior.",
    ),
    _minor(
        "cups", 12, "Knight of Cups",
        ["romance", "charm", "imagination"],
        "The romantic knight brings proposals and invitations. Follow your heart.",
        "Unrealistic expectations, moodiness, or jealousy.",
    ),
    _minor(
        "cups", 13, "Queen of Cups",
        ["compassion", "nurturing", "intuition"],
        "Deeply intuitive and emotionally nurturing. Trust your feelings and care for others.",
        "Inner feelings, self-care needed, or emotional boundaries.",
    ),
    _minor(
        "cups", 14, "King of Cups",
        ["emotional balance", "control", "generosity"],
        "Mastery over emotions. Wise counsel and emotional stability for all.",
        "Emotional manipulation, moodiness, or volatility.",
    ),
    _minor(
        "swords", 1, "Ace of Swords",
        ["breakthrough", "clarity", "truth"],
        "Mental clarity and breakthrough. The sword cuts through confusion to reveal truth.",
        "Confusion, chaos, or lack of clarity. Misuse of intellect.",
    ),
    _minor(
        "swords", 2, "Two of Swords",
        ["difficult decisions", "denial", "stalemate"],
        "At a crossroads, perhaps avoiding a difficult choice. Remove the blindfold.",
        "Indecision, confusion, or information overload.",
    ),
    _minor(
        "swords", 3, "Three of Swords",
        ["heartbreak", "suffering", "grief"],
        "Painful heartbreak and emotional pain. Allow yourself to grieve.",
        "Recovery, forgiveness, or moving on from pain.",
    ),
    _minor(
        "swords", 4, "Four of Swords",
        ["rest", "recovery", "contemplation"],
        "A time for rest and recovery. Step back and recharge before continuing.",
        "Restlessness, burnout, or awakening from rest.",
    ),
    _minor(
        "swords", 5, "Five of Swords",
        ["conflict", "defeat", "win at all costs"],
        "Hollow victory or defeat. Consider whether winning is worth the cost.",
        "Reconciliation, making amends, or past resentment.",
    ),
    _minor(
        "swords", 6, "Six of Swords",
        ["transition", "change", "rite of passage"],
        "Moving away from difficulty toward calmer waters. A necessary transition.",
        "Resistance to change, unfinished business, or unable to move on.",
    ),
    _minor(
        "swords", 7, "Seven of Swords",
        ["deception", "strategy", "resourcefulness"],
        "Strategy or deception. Are you being clever or underhanded?",
        "Coming clean, conscience, or getting caught.",
    ),
    _minor(
        "swords", 8, "Eight of Swords",
        ["restriction", "imprisonment", "self-victimization"],
        "Feeling trapped, but the bindings are often self-imposed. You can free yourself.",
        "Self-acceptance, new perspective, or freedom.",
    ),
    _minor(
        "swords", 9, "Nine of Swords",
        ["anxiety", "worry", "fear"],
        "Nightmares and anxiety. Your fears may be worse than reality.",
        "Hope, reaching out, or worst is over.",
    ),
    _minor(
        "swords", 10, "Ten of Swords",
        ["painful endings", "betrayal", "rock bottom"],
        "The darkest hour before dawn. A painful ending, but also a fresh start.",
        "Recovery, regeneration, or lessons learned.",
    ),
    _minor(
        "swords", 11, "Page of Swords",
        ["curiosity", "restlessness", "mental energy"],
        "Sharp mind eager for knowledge. Stay curious but think before speaking.",
        "Hasty decisions, scattered thoughts, or all talk no action.",
    ),
    _minor(
        "swords", 12, "Knight of Swords",
        ["ambitious", "action-oriented", "driven"],
        "Charging forward with determination. Act quickly but don't be reckless.",
        "Restlessness, burnout, or aggression without direction.",
    ),
    _minor(
        "swords", 13, "Queen of Swords",
        ["clear thinking", "independence", "direct communication"],
        "Sharp intellect and clear boundaries. Speak truth with compassion.",
        "Coldness, cruelty, or using words as weapons.",
    ),
    _minor(
        "swords", 14, "King of Swords",
        ["intellectual power", "authority", "truth"],
        "Mastery of intellect and clear judgment. Make decisions with wisdom.",
        "Tyranny, manipulation, or misuse of power.",
    ),
    _minor(
        "pentacles", 1, "Ace of Pentacles",
        ["new opportunity", "prosperity", "manifestation"],
        "A new opportunity for material abundance. Plant seeds for future prosperity.",
        "Lost opportunity, lack of planning, or scarcity mindset.",
    ),
    _minor(
        "pentacles", 2, "Two of Pentacles",
        ["balance", "adaptability", "time management"],
        "Juggling priorities and maintaining balance. Stay flexible.",
        "Overcommitted, imbalance, or difficulty prioritizing.",
    ),
    _minor(
        "pentacles", 3, "Three of Pentacles",
        ["teamwork", "collaboration", "learning"],
        "Collaboration and skilled work. Your talents are being recognized.",
        "Lack of teamwork, disregard for skills, or poor quality.",
    ),
    _minor(
        "pentacles", 4, "Four of Pentacles",
        ["saving", "security", "conservatism"],
        "Holding tight to resources. Security is good, but don't let it become greed.",
        "Generosity, spending, or letting go of control.",
    ),
    _minor(
        "pentacles", 5, "Five of Pentacles",
        ["financial loss", "poverty", "isolation"],
        "Difficult times and feeling left out in the cold. Help may be closer than you think.",
        "Recovery, spiritual poverty improving, or finding support.",
    ),
    _minor(
        "pentacles", 6, "Six of Pentacles",
        ["generosity", "charity", "sharing"],
        "Giving and receiving in balance. Generosity flows in both directions.",
        "Self-care, one-sided generosity, or debt.",
    ),
    _minor(
        "pentacles", 7, "Seven of Pentacles",
        ["patience", "investment", "long-term view"],
        "Evaluating progress and waiting for harvest. Patience will pay off.",
        "Impatience, poor results, or lack of reward.",
    ),
    _minor(
        "pentacles", 8, "Eight of Pentacles",
        ["apprenticeship", "skill development", "diligence"],
        "Dedication to craft and continuous improvement. Master your skills.",
        "Perfectionism, lack of motivation, or misdirected efforts.",
    ),
    _minor(
        "pentacles", 9, "Nine of Pentacles",
        ["abundance", "luxury", "self-sufficiency"],
        "Enjoying the fruits of your labor. Independence and material comfort.",
        "Self-worth issues, overinvestment in work, or hustling.",
    ),
    _minor(
        "pentacles", 10, "Ten of Pentacles",
        ["wealth", "family", "legacy"],
        "Generational wealth and family security. Building lasting legacy.",
        "Family financial troubles, loss, or short-term focus.",
    ),
    _minor(
        "pentacles", 11, "Page of Pentacles",
        ["manifestation", "financial opportunity", "study"],
        "Eager student ready to learn practical skills. New opportunities for growth.",
        "Lack of focus, procrastination, or unrealistic goals.",
    ),
    _minor(
        "pentacles", 12, "Knight of Pentacles",
        ["efficiency", "routine", "conservatism"],
        "Steady, reliable progress. Stay the course with patience.",
        "Boredom, stagnation, or stubbornness.",
    ),
    _minor(
        "pentacles", 13, "Queen of Pentacles",
        ["nurturing", "practical", "providing"],
        "Practical wisdom and nurturing abundance. Create a comfortable home.",
        "Work-life imbalance, smothering, or financial independence needed.",
    ),
    _minor(
        "pentacles", 14, "King of Pentacles",
        ["wealth", "business", "leadership"],
        "Material success and business acumen. Build lasting prosperity.",
        "Greed, materialism, or corruption.",
    ),
)

FULL_DECK: Tuple[Card, ...] = MAJOR_ARCANA + MINOR_ARCANA
CARD_ID_INDEX: Dict[str, Card] = {c.id: c for c in FULL_DECK}  # quick lookup by id

assert len(FULL_DECK) == 78, f"RWS deck size should be 78, got {len(FULL_DECK)}"
assert len(CARD_ID_INDEX) == 78, "card ids must be unique"


# =========================
# Lookups
# =========================

def get_card_by_id(card_id: str) -> Optional[Card]:
    """Exact-match lookup; None when the id is not in the catalog."""
    return CARD_ID_INDEX.get(card_id)


def list_by_arcana(arcana: str) -> List[Card]:
    if arcana not in ARCANA_VALUES:
        raise InvalidParameterError(f"Unknown arcana: {arcana!r}")
    return [c for c in FULL_DECK if c.arcana == arcana]


def list_by_suit(suit: str) -> List[Card]:
    if suit not in SUIT_VALUES:
        raise InvalidParameterError(f"Unknown suit: {suit!r}")
    return [c for c in FULL_DECK if c.suit == suit]


# =========================
# Shuffling
# =========================

def fisher_yates_shuffle(items: Sequence[Card], rng: random.Random) -> List[Card]:
    """
    Fisher–Yates (Knuth) shuffle.
    Returns a new list and does not mutate the input.
    """
    arr = list(items)
    for i in range(len(arr) - 1, 0, -1):
        j = rng.randint(0, i)  # inclusive
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def get_random_cards(count: int, rng: random.Random) -> List[Card]:
    """
    Pick `count` distinct cards uniformly at random from the full deck.

    Shuffle-then-take, so a card can never appear twice.
    """
    if not isinstance(count, int) or not (1 <= count <= len(FULL_DECK)):
        raise InvalidParameterError(
            f"count must be an integer in [1, {len(FULL_DECK)}]; got {count!r}"
        )
    return fisher_yates_shuffle(FULL_DECK, rng)[:count]
