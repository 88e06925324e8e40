from .config import GIFT_IDEA_COUNT
from .models import RecipientProfile


GIFT_REQUEST = """
I need birthday gift ideas for someone with the following details:

Name: {recipient_name}
Age: {age}
Gender: {gender}
Relationship to me: {relationship}
Interests/Hobbies: {interests}
Budget: {budget}
Preferred Gift Type: {preferred_gift_type}

{ask}
"""

FIRST_ASK = "Please suggest {k} specific gift ideas that would be meaningful and appropriate."

REGENERATE_ASK = """
Please suggest {k} COMPLETELY DIFFERENT gift ideas than you might have suggested before.
Do not repeat earlier suggestions. Be creative and think outside the box.
"""

OUTPUT_FORMAT = """
For each gift idea, provide:
1. The name of the gift
2. A brief description (1-2 sentences)
3. Why it's appropriate for this person
4. An estimated price range
5. 2-3 specific stores or websites where this gift can be purchased
6. 2-3 recommended brands that make high-quality versions of this gift

Format the response as a JSON array with objects containing fields:
- name (string)
- description (string)
- reason (string)
- priceRange (string)
- whereToBuy (array of store names)
- recommendedBrands (array of brand names)

IMPORTANT: Your response must be a valid JSON array that can be parsed as-is.
Start your response with [ and end with ]. Do not add any text before or after the array.
"""


def build_gift_prompt(profile: RecipientProfile, is_regenerate: bool = False) -> str:
    ask = REGENERATE_ASK if is_regenerate else FIRST_ASK
    request = GIFT_REQUEST.format(
        recipient_name=profile.recipient_name,
        age=profile.age,
        gender=profile.gender,
        relationship=profile.relationship,
        interests=profile.interests,
        budget=profile.budget,
        preferred_gift_type=profile.preferred_gift_type,
        ask=ask.format(k=GIFT_IDEA_COUNT).strip(),
    )
    return f"{request.strip()}\n\n{OUTPUT_FORMAT.strip()}"
