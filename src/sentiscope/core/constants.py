"""Constants and configuration values for SentiScope."""

# Aspect and Sentiment Constants
class AspectConstants:
    """Fixed aspect taxonomy and sentiment labels."""

    ASPECTS = (
        "Service",
        "Cleanliness",
        "Location",
        "Food",
        "Price",
        "Amenities",
        "RoomComfort",
        "StaffBehavior",
        "Facilities",
    )

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    SENTIMENTS = (POSITIVE, NEUTRAL, NEGATIVE)

    # Wide-format column templates
    WIDE_SENTIMENT_COLUMN = "aspect_{aspect}_sentiment"
    WIDE_CONFIDENCE_COLUMN = "aspect_{aspect}_confidence"

    # Long-format column order
    LONG_COLUMNS = (
        "review_id", "hotel_id", "hotel_name", "language", "review_date",
        "rating", "aspect", "sentiment", "confidence", "review_text",
    )

    UNKNOWN_HOTEL = "Unknown"

# Lexicon Constants
class LexiconConstants:
    """Word lists for keyword extraction and the heuristic ensemble."""

    # Mixed Indonesian/English stop words
    STOPWORDS = tuple(
        "the a an and or to of in on at for dengan dan yang untuk di ke dari "
        "sangat sekali was were is are itu ini pada dekat lokasi nyaman bersih kotor".split()
    )

    POSITIVE_WORDS = (
        "bersih", "ramah", "cepat", "strategis", "enak", "lezat", "nyaman", "bagus", "rapi",
        "clean", "friendly", "tasty", "delicious", "comfy", "comfortable", "great", "helpful",
        "convenient",
    )

    NEGATIVE_WORDS = (
        "kotor", "lambat", "berisik", "bau", "mahal", "rusak", "sempit", "buruk", "panas",
        "dirty", "slow", "noisy", "smelly", "overpriced", "broken", "cramped", "bad", "hot",
    )

    MIN_TOKEN_LENGTH = 3  # shorter tokens are dropped

# Heuristic Scoring Constants
class ScoringConstants:
    """Thresholds of the rule-based ensemble."""

    HIGH_RATING = 4  # rating >= this nudges the vote up
    LOW_RATING = 2  # rating <= this nudges the vote down
    RATING_NUDGE = 0.5
    VOTE_THRESHOLD = 0.25

    BASE_CONFIDENCE = 0.65
    EVIDENCE_WEIGHT = 0.08  # per matched word
    MAX_EVIDENCE_BONUS = 0.3
    RATING_WEIGHT = 0.05  # per star away from 3
    MIN_CONFIDENCE = 0.6
    MAX_CONFIDENCE = 0.98

# UI Constants
class UIConstants:
    """Constants for the dashboard."""

    ALL = "all"  # "no filter" sentinel
    LANGUAGES = {
        "id": "Bahasa Indonesia",
        "en": "English",
    }
    SENTIMENT_COLORS = {
        "positive": "#22c55e",
        "neutral": "#a3a3a3",
        "negative": "#ef4444",
    }
    TREND_COLOR = "#38bdf8"
    TOPIC_COLOR = "#a78bfa"

    MIN_RATING = 1
    MAX_RATING = 5

    INITIAL_STATUS = "Loaded mock data (you can upload CSV)"

# Mock Data Constants
class MockDataConstants:
    """Seed dataset shown before any upload."""

    SEED_ROWS = (
        {
            "review_id": "R0001", "hotel_id": "H001", "hotel_name": "Grand Nusantara Hotel",
            "language": "id", "review_date": "2024-10-15", "rating": 5, "aspect": "Service",
            "sentiment": "positive", "confidence": 0.92,
            "review_text": "Pelayanan staf sangat ramah dan cepat. Kamar bersih, sarapan enak, lokasi strategis.",
        },
        {
            "review_id": "R0001", "hotel_id": "H001", "hotel_name": "Grand Nusantara Hotel",
            "language": "id", "review_date": "2024-10-15", "rating": 5, "aspect": "Cleanliness",
            "sentiment": "positive", "confidence": 0.9,
            "review_text": "Pelayanan staf sangat ramah dan cepat. Kamar bersih, sarapan enak, lokasi strategis.",
        },
        {
            "review_id": "R0002", "hotel_id": "H002", "hotel_name": "Seaside Bay Resort",
            "language": "en", "review_date": "2024-11-20", "rating": 3, "aspect": "Amenities",
            "sentiment": "negative", "confidence": 0.78,
            "review_text": "Pool was dirty and the gym was cramped. Breakfast was average.",
        },
        {
            "review_id": "R0003", "hotel_id": "H003", "hotel_name": "Mountain View Lodge",
            "language": "en", "review_date": "2025-01-08", "rating": 4, "aspect": "Location",
            "sentiment": "positive", "confidence": 0.86,
            "review_text": "Great location near the trails; staff were helpful.",
        },
    )

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "0.1.0"
