"""Prompt templates for the suggestion flows."""

from .schemas import DietSuggestionsInput, MoodChartInput

DIET_SUGGESTIONS_PROMPT = """You are a helpful AI assistant providing general health and wellness advice.
A user has provided their BMI and related information. Your goal is to provide safe, general, and actionable diet and lifestyle suggestions to help them work towards or maintain a healthier weight.
Do NOT provide specific medical advice or create detailed meal plans. Focus on general principles of healthy eating and living.
Keep suggestions positive and encouraging.

User Information:
- BMI: {bmi}
- BMI Category: "{bmi_category}"
- Current Weight: {current_weight_kg} kg
- Height: {height_cm} cm

Based on this information, please provide:
1. A 'mainSuggestion': A brief, encouraging summary statement or main piece of advice.
2. A list of 'dietTips': 3-5 general, actionable diet tips.
3. A list of 'lifestyleRecommendations': 2-3 general lifestyle recommendations.

Tailor the tone and focus of the suggestions to the user's BMI category:
- If "Underweight", suggest healthy ways to gain weight.
- If "Overweight" or "Obese", suggest healthy ways to lose or manage weight.
- If "Normal weight", suggest ways to maintain a healthy lifestyle.

Respond with a JSON object with the keys "mainSuggestion", "dietTips" and "lifestyleRecommendations".
"""

MOOD_CHART_PROMPT = """You are an AI assistant specializing in analyzing mood trends from journal entries.

Given the following journal entries, analyze the overall mood trends based on the tags used in each entry. Generate mood chart data where the x-axis is the date and the y-axis represents the mood score. The mood score should be a numerical value between -1 (very negative) and 1 (very positive), based on the sentiment associated with the tags. Also, generate a summary of the mood trends observed in the journal entries.

Journal Entries:
{entries}

Respond with a JSON object with two keys: "chartData", a JSON string encoding a list of objects with "date" (YYYY-MM-DD) and "moodScore", and "summary", a concise summary of the mood trends.
"""

ENTRY_TEMPLATE = "Date: {date}\nText: {text}\nTags: {tags}"


def render_diet_prompt(data: DietSuggestionsInput) -> str:
    return DIET_SUGGESTIONS_PROMPT.format(
        bmi=data.bmi,
        bmi_category=data.bmi_category,
        current_weight_kg=data.current_weight_kg,
        height_cm=data.height_cm,
    )


def render_mood_chart_prompt(data: MoodChartInput) -> str:
    entries = "\n\n".join(
        ENTRY_TEMPLATE.format(date=entry.date, text=entry.text, tags=", ".join(entry.tags))
        for entry in data.journal_entries
    )
    return MOOD_CHART_PROMPT.format(entries=entries)
