"""Retail Excellence Scan, version 1.

Twelve questions, three per competency dimension. Option scores are in
[0, 1]; question weights scale how much a question counts inside its
dimension. Changing anything here changes scores, so bump
ASSESSMENT_VERSION with it.
"""

from types import MappingProxyType

from models.schemas.assessment import AssessmentOption, AssessmentQuestion

ASSESSMENT_VERSION = "v1"


def _likert() -> tuple[AssessmentOption, ...]:
    labels = [
        "Not important",
        "Slightly important",
        "Moderately important",
        "Very important",
        "Extremely important",
    ]
    return tuple(
        AssessmentOption(id=str(i + 1), text=label, score=i * 0.25)
        for i, label in enumerate(labels)
    )


def _options(*choices: tuple[str, str, float]) -> tuple[AssessmentOption, ...]:
    return tuple(AssessmentOption(id=oid, text=text, score=score) for oid, text, score in choices)


ASSESSMENT_QUESTIONS_V1: tuple[AssessmentQuestion, ...] = (
    # --- Service excellence ---
    AssessmentQuestion(
        id="se-1",
        dimension="service_excellence",
        type="multiple_choice",
        text="A VIP client enters the boutique looking frustrated. What is your first action?",
        options=_options(
            ("a", "Immediately approach and ask how you can assist", 1.0),
            ("b", "Observe from a distance to assess their mood", 0.3),
            ("c", "Alert your manager before approaching", 0.5),
            ("d", "Wait for them to approach the counter", 0.0),
        ),
        weight=1.0,
        explanation="Proactive, empathetic service is key in luxury retail.",
    ),
    AssessmentQuestion(
        id="se-2",
        dimension="service_excellence",
        type="likert",
        text=(
            "On a scale of 1-5, how important is it to follow up with a client "
            "after a significant purchase?"
        ),
        options=_likert(),
        weight=0.8,
        explanation="Post-purchase follow-up strengthens relationships and builds loyalty.",
    ),
    AssessmentQuestion(
        id="se-3",
        dimension="service_excellence",
        type="situational",
        text="You notice a client admiring a product but hesitating. How do you proceed?",
        options=_options(
            ("a", "Give them space to decide on their own", 0.3),
            ("b", "Approach and share the product story and craftsmanship", 1.0),
            ("c", "Offer a discount to encourage purchase", 0.0),
            ("d", "Suggest a cheaper alternative", 0.2),
        ),
        weight=1.2,
        explanation="Storytelling and education create value in luxury sales.",
    ),
    # --- Clienteling ---
    AssessmentQuestion(
        id="cl-1",
        dimension="clienteling",
        type="multiple_choice",
        text="How often should you contact a VIC (Very Important Client)?",
        options=_options(
            ("a", "Only when they visit the boutique", 0.2),
            ("b", "Monthly, regardless of purchase activity", 0.4),
            ("c", "Based on their preferences and purchase patterns", 1.0),
            ("d", "Weekly to ensure top-of-mind", 0.3),
        ),
        weight=1.0,
        explanation="Personalized frequency based on client preferences is most effective.",
    ),
    AssessmentQuestion(
        id="cl-2",
        dimension="clienteling",
        type="situational",
        text="A client mentions they're traveling to Paris next month. What do you do?",
        options=_options(
            ("a", "Note it in CRM for future reference", 0.4),
            ("b", "Immediately connect them with Paris boutique and set an appointment", 1.0),
            ("c", "Wish them a great trip", 0.1),
            ("d", "Offer to ship products to Paris", 0.3),
        ),
        weight=1.3,
        explanation="Proactive global service creates exceptional experiences.",
    ),
    AssessmentQuestion(
        id="cl-3",
        dimension="clienteling",
        type="multiple_choice",
        text="What is the most important information to track about a VIC client?",
        options=_options(
            ("a", "Their purchase history and spending", 0.5),
            ("b", "Their personal preferences, interests, and special occasions", 1.0),
            ("c", "Their contact information", 0.2),
            ("d", "Their complaints or issues", 0.4),
        ),
        weight=1.1,
        explanation="Understanding personal details enables meaningful personalization.",
    ),
    # --- Operations ---
    AssessmentQuestion(
        id="op-1",
        dimension="operations",
        type="situational",
        text="During inventory, you find a discrepancy. What is your priority?",
        options=_options(
            ("a", "Report to manager immediately", 0.5),
            ("b", "Re-count to verify the discrepancy", 0.7),
            ("c", "Document and investigate root cause", 1.0),
            ("d", "Adjust system to match physical count", 0.0),
        ),
        weight=1.0,
        explanation="Systematic problem-solving prevents recurring issues.",
    ),
    AssessmentQuestion(
        id="op-2",
        dimension="operations",
        type="multiple_choice",
        text="What is the most critical aspect of opening procedures?",
        options=_options(
            ("a", "Arriving on time", 0.3),
            ("b", "Security and cash handling protocols", 1.0),
            ("c", "Turning on lights and music", 0.1),
            ("d", "Checking emails", 0.2),
        ),
        weight=0.9,
        explanation="Security protocols protect assets and ensure compliance.",
    ),
    AssessmentQuestion(
        id="op-3",
        dimension="operations",
        type="likert",
        text=(
            "Rate the importance of maintaining visual merchandising standards "
            "throughout the day."
        ),
        options=_likert(),
        weight=0.8,
        explanation="Consistent visual standards maintain brand excellence.",
    ),
    # --- Leadership signals ---
    AssessmentQuestion(
        id="ls-1",
        dimension="leadership_signals",
        type="situational",
        text="A junior team member is struggling with clienteling. How do you help?",
        options=_options(
            ("a", "Do it for them to ensure quality", 0.2),
            ("b", "Provide specific examples and coach through next interaction", 1.0),
            ("c", "Tell them to read the training materials", 0.3),
            ("d", "Escalate to manager", 0.1),
        ),
        weight=1.2,
        explanation="Coaching and mentoring develop team capabilities.",
    ),
    AssessmentQuestion(
        id="ls-2",
        dimension="leadership_signals",
        type="multiple_choice",
        text="When a conflict arises between team members, what is your approach?",
        options=_options(
            ("a", "Avoid getting involved, let them work it out", 0.1),
            ("b", "Listen to both sides and facilitate a resolution", 1.0),
            ("c", "Take one person's side", 0.0),
            ("d", "Immediately escalate to management", 0.4),
        ),
        weight=1.1,
        explanation="Effective conflict resolution maintains team harmony.",
    ),
    AssessmentQuestion(
        id="ls-3",
        dimension="leadership_signals",
        type="likert",
        text="How important is it to recognize and celebrate team members' achievements?",
        options=_likert(),
        weight=0.9,
        explanation="Recognition drives motivation and engagement.",
    ),
)

QUESTIONS_BY_ID = MappingProxyType({q.id: q for q in ASSESSMENT_QUESTIONS_V1})
