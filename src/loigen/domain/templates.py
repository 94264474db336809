"""
Letter of Intent copy.

Mad-libs style: every template is a plain ``str.format`` string filled from
already formatted values. Available placeholders:

    {agent_first_name} {short_address} {list_price}
    {mortgage_balance} {city} {sender_name}

No template contains logic; picking the right one happens in
``loigen.domain.rules`` and ``loigen.services.letters``.
"""
from __future__ import annotations

from types import MappingProxyType

from loigen.domain.rules import TemplateCategory

# =============================================================================
# MORTGAGE SCHEME
# =============================================================================

_NO_MORTGAGE = {
    "v1": """Hey {agent_first_name},

Are you still trying to sell the house on {short_address}? I think {list_price} sounds pretty reasonable for it. Would your seller be open to a conversation about possibly selling on terms? Most of the other houses I've bought in this area, I gave the seller a down payment and paid them over time. I pay for agent commissions and closing costs typically as well.

Is this possibly worth a further conversation, or am I being completely unreasonable?

Thanks,
{sender_name}""",
    "v2": """Hi {agent_first_name},

I came across your listing on {short_address} and {list_price} looks like a fair number to me. Since it looks like the property is owned free and clear, would your seller consider carrying the financing? I'd put money down up front, pay them monthly, and cover your commission and the closing costs.

Would that be worth a quick call?

Best,
{sender_name}""",
    "v3": """{agent_first_name},

Quick question on {short_address}. I'm comfortable with {list_price}, and I'm wondering if the owner would entertain terms instead of an all-cash sale. I typically pay a down payment, make monthly payments to the seller, and take care of commissions and closing costs.

Open to talking it through?

Thanks,
{sender_name}""",
}

_LOW_EQUITY = {
    "v1": """Hey {agent_first_name},

Are you still trying to sell the house on {short_address}? From what I can see online, it looks like your seller has a remaining mortgage balance of about {mortgage_balance}. With how tough the market is right now, it seems like it might be hard for them to sell this without coming out of pocket. If I could pay for all closing costs (including your commission) and pay some cash to them, do you think we could have a conversation about how my process works?

Or am I being completely unreasonable?

Thanks,
{sender_name}""",
    "v2": """Hi {agent_first_name},

I'm reaching out about {short_address}. Public records suggest there's still around {mortgage_balance} owed on it, which doesn't leave your seller much room after a traditional sale. I can take over the closing costs, make sure your commission is paid, and put some cash in your seller's pocket.

Would you be open to hearing how that works?

Best,
{sender_name}""",
    "v3": """{agent_first_name},

Is {short_address} still available? It looks like the seller owes roughly {mortgage_balance}, so a regular sale could end up costing them money at closing. I can cover every closing cost including your commission and still pay your seller something on top.

Worth a five minute conversation?

Thanks,
{sender_name}""",
}

_STANDARD = {
    "v1": """Hey {agent_first_name},

Are you still trying to sell the house on {short_address}? From what I can see online, it looks like I could probably pay {list_price} for it.
I'm a local investor, and I've worked with other sellers in {city} who were able to sell to me on terms that made sense for them. Basically how it works is I cover all closing costs (including your commission), pay them some cash upfront, and pay out their equity over time. Do you think it'd be worth having a quick chat about how my process could work for them?

Or am I way off base here?

Thanks,
{sender_name}""",
    "v2": """Hi {agent_first_name},

I'm interested in {short_address} and could likely get to {list_price}. I buy houses locally and have closed with several sellers in {city} on terms: I pay all closing costs and your commission, give your seller cash at closing, and pay the rest of their equity over time.

Would your seller be open to a short call about it?

Best,
{sender_name}""",
    "v3": """{agent_first_name},

Is {short_address} still on the market? I think I could pay {list_price}. I'm an investor here in {city}, and a lot of the sellers I work with like my approach: closing costs and commission covered, some cash up front, and their equity paid out over time.

Am I in the right ballpark?

Thanks,
{sender_name}""",
}

# =============================================================================
# STRATEGY SCHEME
# =============================================================================

_SELLER_FINANCING = {
    "v1": """Hey {agent_first_name},

Are you still trying to sell the house on {short_address}? It looks like your seller has a lot of equity in it, and {list_price} seems reasonable to me. Would they be open to carrying the note and getting paid monthly instead of all at once? I'd put money down and cover closing costs and your commission.

Is this worth a conversation?

Thanks,
{sender_name}""",
    "v2": """Hi {agent_first_name},

I'm interested in {short_address} at {list_price}. Since there's very little owed on it, would your seller consider financing the sale themselves? They'd get a down payment plus steady monthly income, and I'd handle the closing costs and your commission.

Open to a quick call?

Best,
{sender_name}""",
    "v3": """{agent_first_name},

Quick question on {short_address}: would the owner take {list_price} on seller-financed terms? Down payment up front, monthly payments after that, and I pay your commission and all closing costs.

Let me know if that's worth talking through.

Thanks,
{sender_name}""",
}

_HYBRID = {
    "v1": """Hey {agent_first_name},

Are you still trying to sell the house on {short_address}? It looks like there's about {mortgage_balance} owed on it. I could keep the existing loan in place, pay your seller some cash for part of their equity, and pay out the rest over time, all at {list_price} and with closing costs and your commission covered.

Would that be worth a conversation?

Thanks,
{sender_name}""",
    "v2": """Hi {agent_first_name},

I'm looking at {short_address}. With roughly {mortgage_balance} still owed, I think I can make {list_price} work by taking over the current mortgage and paying your seller's remaining equity partly in cash and partly over time. I'd also cover your commission and closing costs.

Open to hearing more?

Best,
{sender_name}""",
    "v3": """{agent_first_name},

Is {short_address} still available? The seller appears to owe about {mortgage_balance}. I'd like to offer {list_price} by keeping the existing financing and splitting their equity between cash at closing and monthly payments.

Am I way off here?

Thanks,
{sender_name}""",
}

_SUBJECT_TO = {
    "v1": """Hey {agent_first_name},

Are you still trying to sell the house on {short_address}? From what I can see, your seller owes around {mortgage_balance}, which makes a traditional sale tough. I could take over the payments on the existing mortgage, cover all closing costs (including your commission), and get them out from under the house.

Do you think that's worth a conversation?

Thanks,
{sender_name}""",
    "v2": """Hi {agent_first_name},

I noticed {short_address} has about {mortgage_balance} still owed on it. I buy houses by taking over the existing loan payments, so your seller walks away without bringing money to closing, and I pay your commission and the closing costs.

Would they be open to that?

Best,
{sender_name}""",
    "v3": """{agent_first_name},

Quick one on {short_address}. With roughly {mortgage_balance} on the mortgage, I could step in and take over the payments as they are, and handle your commission and all closing costs.

Worth a quick call?

Thanks,
{sender_name}""",
}

# Strategy scheme rows whose LTV could not be read.
UNKNOWN_PLACEHOLDER = """[NO LETTER TEMPLATE: LTV missing or unreadable for {short_address}]

Review this listing manually before reaching out to {agent_first_name}.
List price: {list_price}
Mortgage balance: {mortgage_balance}
City: {city}"""

_UNKNOWN = {"v1": UNKNOWN_PLACEHOLDER, "v2": UNKNOWN_PLACEHOLDER, "v3": UNKNOWN_PLACEHOLDER}


TEMPLATES: MappingProxyType = MappingProxyType(
    {
        TemplateCategory.NO_MORTGAGE: MappingProxyType(_NO_MORTGAGE),
        TemplateCategory.LOW_EQUITY: MappingProxyType(_LOW_EQUITY),
        TemplateCategory.STANDARD: MappingProxyType(_STANDARD),
        TemplateCategory.SELLER_FINANCING: MappingProxyType(_SELLER_FINANCING),
        TemplateCategory.HYBRID: MappingProxyType(_HYBRID),
        TemplateCategory.SUBJECT_TO: MappingProxyType(_SUBJECT_TO),
        TemplateCategory.UNKNOWN: MappingProxyType(_UNKNOWN),
    }
)
