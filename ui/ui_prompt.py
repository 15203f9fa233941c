import json

from schemas import ChatMessage, Product, ProductPayload


SYSTEM_PROMPT = "You are a helpful beauty advisor that crafts clear step-by-step routines using given products."

ROUTINE_INSTRUCTION = (
    "Create a personalized, step-by-step routine using only these selected products. "
    "Be concise and include when to use each item (AM/PM or pre/post styling), "
    "and any important cautions."
)

GREETING = 'Hi — select products and click "Generate Routine" to get started. Ask follow-up questions after a routine is generated.'
EMPTY_SELECTION_MESSAGE = "Please select one or more products before generating a routine."
GENERATING_MESSAGE = "Generating your personalized routine…"
ROUTINE_FAILED_MESSAGE = "Sorry — I couldn't generate the routine right now. Please try again."
CHAT_FAILED_MESSAGE = "Sorry — I couldn't reach the server. Try again."


def product_payload(products: list[Product]) -> list[dict]:
    return [ProductPayload.from_product(p).model_dump() for p in products]


def build_routine_messages(products: list[Product]) -> list[ChatMessage]:
    payload = json.dumps(product_payload(products), ensure_ascii=False)
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=f"{ROUTINE_INSTRUCTION} Products: {payload}"),
    ]
