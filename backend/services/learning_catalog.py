"""Seed learning catalog: 15 modules across 6 categories.

Used as the default module set for learning recommendations when the
caller does not supply its own catalog.
"""

from types import MappingProxyType

from models.schemas.learning import LearningModule

_CONTENT_BASE = "https://example.com/modules/"


def _module(module_id, title, description, category, minutes, difficulty,
            content_type, slug, levels, gaps=()):
    return LearningModule(
        id=module_id,
        title=title,
        description=description,
        category=category,
        duration_minutes=minutes,
        difficulty=difficulty,
        content_type=content_type,
        content_url=_CONTENT_BASE + slug,
        target_role_levels=list(levels),
        target_gaps=list(gaps),
    )


LEARNING_MODULES: tuple[LearningModule, ...] = (
    # --- Service excellence ---
    _module(
        "se-fundamentals",
        "Service Excellence Fundamentals",
        "Master the core principles of luxury service delivery, from greeting to farewell. "
        "Learn the art of anticipating needs and exceeding expectations.",
        "service_excellence", 30, "beginner", "video", "service-fundamentals",
        ["L1", "L2"], ["service_excellence"],
    ),
    _module(
        "se-personalization",
        "Personalizing the Luxury Experience",
        "Advanced techniques for creating memorable, personalized moments that build "
        "lasting impressions and drive loyalty.",
        "service_excellence", 45, "intermediate", "article", "personalization",
        ["L2", "L3"], ["service_excellence"],
    ),
    _module(
        "se-recovery",
        "Service Recovery & Complaint Handling",
        "Turn challenging situations into opportunities. Master the art of graceful service "
        "recovery and maintaining client relationships during difficulties.",
        "service_excellence", 35, "intermediate", "exercise", "service-recovery",
        ["L2", "L3", "L4"], ["service_excellence"],
    ),
    _module(
        "se-standards",
        "Luxury Service Standards Mastery",
        "Deep dive into luxury service protocols, etiquette, and standards that define "
        "excellence in high-end retail environments.",
        "service_excellence", 40, "advanced", "video", "luxury-standards",
        ["L3", "L4", "L5"], ["service_excellence"],
    ),
    # --- Clienteling ---
    _module(
        "cl-basics",
        "Introduction to Clienteling",
        "Learn the fundamentals of building client relationships, CRM usage, and the "
        "importance of personalized service in luxury retail.",
        "clienteling", 25, "beginner", "article", "clienteling-basics",
        ["L1", "L2"], ["clienteling"],
    ),
    _module(
        "cl-advanced",
        "Advanced Clienteling Techniques",
        "Build lasting relationships with VIC clients through strategic engagement, "
        "personalized communications, and thoughtful touchpoints.",
        "clienteling", 45, "intermediate", "video", "advanced-clienteling",
        ["L2", "L3", "L4"], ["clienteling"],
    ),
    _module(
        "cl-vic",
        "VIC Management Excellence",
        "Master the art of managing Very Important Client relationships, including "
        "portfolio management, event planning, and strategic outreach.",
        "clienteling", 50, "advanced", "exercise", "vic-management",
        ["L3", "L4", "L5"], ["clienteling"],
    ),
    _module(
        "cl-digital",
        "Digital Clienteling Strategies",
        "Leverage digital tools and social media to maintain client relationships, share "
        "product updates, and drive engagement in the modern era.",
        "clienteling", 35, "intermediate", "article", "digital-clienteling",
        ["L2", "L3", "L4"], ["clienteling"],
    ),
    # --- Operations ---
    _module(
        "op-inventory",
        "Inventory Management Best Practices",
        "Optimize stock levels, reduce shrinkage, maintain accuracy, and ensure product "
        "availability while managing costs effectively.",
        "operations", 40, "intermediate", "exercise", "inventory-management",
        ["L3", "L4", "L5"], ["operations"],
    ),
    _module(
        "op-visual",
        "Visual Merchandising Excellence",
        "Create compelling product displays, maintain visual standards, and understand the "
        "psychology of luxury presentation.",
        "operations", 30, "intermediate", "video", "visual-merchandising",
        ["L2", "L3", "L4"], ["operations"],
    ),
    _module(
        "op-systems",
        "Retail Systems & Technology",
        "Master POS systems, inventory management software, CRM tools, and other essential "
        "retail technologies for operational efficiency.",
        "operations", 35, "beginner", "article", "retail-systems",
        ["L1", "L2", "L3"], ["operations"],
    ),
    # --- Leadership ---
    _module(
        "ld-teams",
        "Leading High-Performance Teams",
        "Coaching, motivating, and developing luxury retail teams. Learn to inspire "
        "excellence and drive results through effective leadership.",
        "leadership", 60, "advanced", "video", "leading-teams",
        ["L4", "L5", "L6"], ["leadership_signals"],
    ),
    _module(
        "ld-coaching",
        "Coaching for Excellence",
        "Develop your coaching skills to unlock potential in team members, provide "
        "constructive feedback, and foster continuous improvement.",
        "leadership", 45, "intermediate", "exercise", "coaching-excellence",
        ["L3", "L4", "L5"], ["leadership_signals"],
    ),
    _module(
        "ld-conflict",
        "Conflict Resolution & Team Dynamics",
        "Navigate team conflicts gracefully, build positive work environments, and maintain "
        "harmony while driving performance.",
        "leadership", 40, "intermediate", "article", "conflict-resolution",
        ["L3", "L4", "L5", "L6"], ["leadership_signals"],
    ),
    # --- Product knowledge and soft skills ---
    _module(
        "pk-leather",
        "Product Knowledge: Leather Goods Craftsmanship",
        "Deep dive into luxury leather goods materials, techniques, heritage, and "
        "storytelling. Learn to communicate product value compellingly.",
        "product_knowledge", 35, "intermediate", "article", "leather-craftsmanship",
        ["L1", "L2", "L3"],
    ),
    _module(
        "ss-communication",
        "Effective Communication in Luxury Retail",
        "Master verbal and non-verbal communication, active listening, and the art of "
        "elegant conversation in professional settings.",
        "soft_skills", 30, "beginner", "video", "effective-communication",
        ["L1", "L2", "L3"],
    ),
)

MODULES_BY_ID = MappingProxyType({m.id: m for m in LEARNING_MODULES})
