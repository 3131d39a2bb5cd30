"""Instructions for each mock data family.

Caller-supplied reference text is spliced into a triple-quoted block. It goes
through ``quote_reference`` first so that it cannot close that block early or
open a code fence of its own.
"""

TRIPLE_QUOTE = '"""'
FENCE = "```"

CHAT_LIST_COUNT = 5
CANVAS_COUNT = 6
VAULT_NODE_COUNT = 8
INTEGRATION_COUNT = 7


def quote_reference(text: str) -> str:
    """Neutralize delimiter sequences in caller-supplied reference text.

    Triple double quotes become escaped quotes and code fences become
    apostrophe runs. The rest of the text is passed through untouched.
    """
    return text.replace(TRIPLE_QUOTE, '\\"\\"\\"').replace(FENCE, "'''")


def _title(text: str) -> str:
    # A title is interpolated inside double quotes on a single line
    return " ".join(quote_reference(text).replace('"', "'").split())


USER_PROFILE = (
    "Generate a realistic but fake user profile for a Gemini power user. "
    "Include name, email, a short bio, and preferences for theme and "
    "notifications. Provide an avatarUrl using picsum.photos. "
    "Respond in JSON format."
)

CHAT_LIST = (
    f"Generate a list of {CHAT_LIST_COUNT} recent chat conversations. "
    "Each chat should have an id (uuid), a short, catchy title, a one-sentence "
    "summary, and a lastUpdated timestamp (as an ISO string). "
    "Respond in JSON format."
)

CANVAS_LIST = (
    f'Generate a list of {CANVAS_COUNT} creative "canvases". Each canvas should '
    "have an id (uuid), a title, a type from ['Code Project', 'Document', "
    "'Whiteboard', 'Design Mockup'], a thumbnailUrl from picsum.photos "
    "(e.g., https://picsum.photos/400/300), and a lastModified date "
    "(ISO string). Respond in JSON format."
)

INTEGRATIONS = (
    f"Generate a list of {INTEGRATION_COUNT} conceptual Zoho integrations for a "
    'master system called "FAA.Zone". Ensure one of the integrations is a '
    "'Custom App' named 'Global Compliance Tracker' with a 'Pending' status "
    "and a description about monitoring cross-border regulatory adherence for "
    "FAA™ operations. For all integrations, include an id (uuid), a name, a "
    "short description, a category from ['CRM', 'Finance', 'HR', 'Marketing', "
    "'Custom App'], a status from ['Live', 'Pending', 'Error'], and a realistic "
    'but fake url (e.g., "https://crm.zoho.faa.zone"). Respond in JSON format.'
)


def chat_history(chat_title: str) -> str:
    """Instruction for the message history of one conversation."""
    return (
        "Generate a realistic chat history for a conversation titled "
        f'"{_title(chat_title)}". Create about 6-10 messages, alternating '
        "between 'user' and 'gemini' as the sender. Each message should have an "
        "id (uuid), sender, content, and a timestamp (ISO string). "
        "Respond in JSON format."
    )


def vault_nodes(memory_log: str) -> str:
    """Instruction that restructures a memory log into vault nodes."""
    return f'''Based on the following FAA™ Memory Log, parse the content to generate a list of "Design Vault" nodes. Specifically:
1. From the "FAA™ Counter-Marketing Execution Methods Applied" section, create a node for each method. Use the method's full name as the 'title' and its description as the 'description'. Set the 'type' to 'Execution Method' and 'status' to 'Active'.
2. From the "FAA™ Applied Marketing Scenarios & Counter-Positioning" section, create a node for each scenario. Use the scenario's title (e.g., "FAA™ x KFC™ – AI-Driven Supply Chain Optimization") as the 'title' and the "FAA™ Solution" text as the 'description'. Set the 'type' to 'Marketing Protocol' and 'status' to 'Active'.
Generate exactly {VAULT_NODE_COUNT} nodes in total based on this logic. Each node must have an id (uuid).
Respond in JSON format.
MEMORY LOG: """{quote_reference(memory_log)}"""'''


def takeout_extraction(takeout_data: str) -> str:
    """Instruction that consolidates raw Takeout data into JSON."""
    return f'''You are an expert data processor. Your task is to analyze the provided raw Google Takeout data (which could be in HTML or JSON format) and consolidate it into a single, clean, structured JSON object.

Follow these rules strictly:
1.  Identify all the chat interactions with Gemini.
2.  For each interaction, extract: a unique ID (generate a UUID), the user's prompt, Gemini's response, and the timestamp.
3.  Structure the final output as a JSON array of these interaction objects.
4.  The output must be ONLY the JSON object, without any surrounding text or markdown.

Raw Takeout data:
"""
{quote_reference(takeout_data)}
"""'''


DESCRIBE_IMAGE = (
    "Describe this image in detail. What is the subject, what is happening, "
    "and what is the style?"
)
