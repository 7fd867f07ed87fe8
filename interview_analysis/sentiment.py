from textblob import TextBlob

# TextBlob polarity lives in [-1, 1]; scaled so one unit is a mild
# positive/negative lean, which is what the scoring adjustments expect.
SENTIMENT_SCALE = 5.0


def sentiment_score(text: str) -> float:
    content = str(text or "").strip()
    if not content:
        return 0.0
    polarity = float(TextBlob(content).sentiment.polarity)
    return round(polarity * SENTIMENT_SCALE, 3)
