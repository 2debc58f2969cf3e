"""Section schema table

One entry per content-section type a converter page can render. Each entry
combines static rules (required keys, array fields) with optional section
rules for conditions that span several fields. The `example` and `notes`
are shown in the structure guide when a section fails.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from converter_validator.schema.rules import (
    ItemRule,
    ObjectItem,
    OneOfArrays,
    PairedArrays,
    QuickReferenceItem,
    SectionRule,
    StringItem,
    StringOrObjectItem,
    TableRowItem,
)


class SectionType(str, Enum):
    """Known content-section names"""
    HERO = "hero"
    QUICK_REFERENCE = "quickReference"
    COMPARISON_TABLE = "comparisonTable"
    VISUAL_CHART = "visualChart"
    STEP_BY_STEP = "stepByStep"
    COMMON_MISTAKES = "commonMistakes"
    EQUIPMENT_GUIDE = "equipmentGuide"
    SCIENTIFIC_BACKGROUND = "scientificBackground"
    REGIONAL_VARIATIONS = "regionalVariations"
    RECIPE_EXAMPLES = "recipeExamples"
    TIPS = "tips"
    FAQ = "faq"
    FAQS = "faqs"
    RELATED = "related"


@dataclass(frozen=True)
class ArrayField:
    """Array-valued key of a section

    Attributes:
        name: key inside the section body
        min_items: lower bound on the array length (0 = no bound)
        item: per-element rule, None when elements are not checked
    """
    name: str
    min_items: int = 0
    item: Optional[ItemRule] = None


@dataclass(frozen=True)
class SectionSchema:
    """Rules for one section type"""
    name: str
    required_keys: Tuple[str, ...]
    optional_keys: Tuple[str, ...] = ()
    arrays: Tuple[ArrayField, ...] = ()
    rules: Tuple[SectionRule, ...] = ()
    example: Dict[str, Any] = field(default_factory=dict)
    notes: Tuple[str, ...] = ()


def _faq_schema(name: str, title: str) -> SectionSchema:
    return SectionSchema(
        name=name,
        required_keys=("title", "items"),
        optional_keys=("description",),
        arrays=(ArrayField("items", 1, ObjectItem(["question", "answer"])),),
        example={
            name: {
                "title": title,
                "description": "Optional description",
                "items": [{"question": "Question?", "answer": "Answer."}]
            }
        }
    )


_SCHEMAS: Tuple[SectionSchema, ...] = (
    SectionSchema(
        name=SectionType.HERO.value,
        required_keys=("title",),
        optional_keys=("subtitle", "intro"),
        example={
            "hero": {
                "title": "Converter Title",
                "subtitle": "Optional subtitle",
                "intro": "Optional introduction"
            }
        }
    ),
    SectionSchema(
        name=SectionType.QUICK_REFERENCE.value,
        required_keys=("title", "items"),
        optional_keys=("description",),
        arrays=(ArrayField("items", 3, QuickReferenceItem()),),
        example={
            "quickReference": {
                "title": "Quick Reference",
                "description": "Optional description",
                "items": [
                    {"ingredient": "Flour", "cup": 1, "grams": 125, "icon": "🍞", "tip": "Optional tip"}
                ]
            }
        },
        notes=(
            'QUICK REFERENCE: Items need "ingredient" + at least one value (cup, grams, celsius, etc.)',
            "Temperature converters: celsius, fahrenheit, gasMark",
            "Volume converters: cup, grams, tablespoon, teaspoon",
        )
    ),
    SectionSchema(
        name=SectionType.COMPARISON_TABLE.value,
        required_keys=("title",),
        optional_keys=("description", "columns", "rows"),
        arrays=(
            ArrayField("columns", 2),
            ArrayField("rows", 8, TableRowItem()),
        ),
        rules=(PairedArrays("columns", "rows"),),
        example={
            "comparisonTable": {
                "title": "Comparison Table",
                "description": "Optional description",
                "columns": ["Column1", "Column2", "Column3"],
                "rows": [{"Column1": "Value1", "Column2": "Value2", "Column3": "Value3"}]
            }
        },
        notes=(
            "COMPARISON TABLE: Need at least 8 rows, columns and rows must both exist",
            "Row keys don't need to exactly match column headers",
        )
    ),
    SectionSchema(
        name=SectionType.VISUAL_CHART.value,
        required_keys=("title",),
        optional_keys=("description", "items"),
        arrays=(ArrayField("items", 2, ObjectItem(["name"], ["weight", "comparison", "visual", "color"])),),
        example={
            "visualChart": {
                "title": "Visual Chart",
                "description": "Optional description",
                "items": [
                    {"name": "Item", "weight": "100g", "comparison": "Light", "visual": "📊", "color": "#ff0000"}
                ]
            }
        }
    ),
    SectionSchema(
        name=SectionType.STEP_BY_STEP.value,
        required_keys=("title", "steps"),
        optional_keys=("description",),
        arrays=(ArrayField("steps", 1, ObjectItem(["number", "title", "content"], ["tip", "warning", "note"])),),
        example={
            "stepByStep": {
                "title": "Step by Step",
                "description": "Optional description",
                "steps": [{"number": 1, "title": "Step 1", "content": "Content"}]
            }
        }
    ),
    SectionSchema(
        name=SectionType.COMMON_MISTAKES.value,
        required_keys=("title",),
        optional_keys=("description", "mistakes", "items"),
        arrays=(
            ArrayField("mistakes", 1, ObjectItem(["mistake", "consequence", "solution"], ["severity", "icon"])),
            ArrayField("items", 1, StringItem()),
        ),
        example={
            "commonMistakes": {
                "title": "Common Mistakes",
                "description": "Optional description",
                "mistakes": [
                    {
                        "mistake": "Mistake",
                        "consequence": "Consequence",
                        "solution": "Solution",
                        "severity": "high",
                        "icon": "⚠️"
                    }
                ]
            }
        }
    ),
    SectionSchema(
        name=SectionType.EQUIPMENT_GUIDE.value,
        required_keys=("title", "tools"),
        optional_keys=("description",),
        arrays=(
            ArrayField(
                "tools", 1,
                ObjectItem(["name", "importance"], ["icon", "features", "priceRange", "recommendedBrands"])
            ),
        ),
        example={
            "equipmentGuide": {
                "title": "Equipment Guide",
                "description": "Optional description",
                "tools": [
                    {
                        "name": "Tool",
                        "importance": "Essential",
                        "icon": "⚖️",
                        "features": ["Feature1", "Feature2"],
                        "priceRange": "$20-$50"
                    }
                ]
            }
        }
    ),
    SectionSchema(
        name=SectionType.SCIENTIFIC_BACKGROUND.value,
        required_keys=("title",),
        optional_keys=("description", "concepts"),
        arrays=(ArrayField("concepts", 1, ObjectItem(["concept"], ["explanation", "examples", "impact"])),),
        example={
            "scientificBackground": {
                "title": "Scientific Background",
                "description": "Optional description",
                "concepts": [
                    {
                        "concept": "Concept",
                        "explanation": "Explanation",
                        "examples": ["Example1", "Example2"],
                        "impact": "Impact"
                    }
                ]
            }
        }
    ),
    SectionSchema(
        name=SectionType.REGIONAL_VARIATIONS.value,
        required_keys=("title",),
        optional_keys=("description", "regions"),
        arrays=(ArrayField("regions", 1, ObjectItem(["region"], ["cupSize", "commonUnits", "system", "note"])),),
        example={
            "regionalVariations": {
                "title": "Regional Variations",
                "description": "Optional description",
                "regions": [
                    {
                        "region": "United States",
                        "cupSize": "240ml",
                        "commonUnits": ["cups", "tablespoons"],
                        "system": "US Customary",
                        "note": "Note"
                    }
                ]
            }
        }
    ),
    SectionSchema(
        name=SectionType.RECIPE_EXAMPLES.value,
        required_keys=("title", "examples"),
        optional_keys=("description",),
        arrays=(ArrayField("examples", 1, ObjectItem(["recipe"], ["original", "converted", "serves", "tip"])),),
        example={
            "recipeExamples": {
                "title": "Recipe Examples",
                "description": "Optional description",
                "examples": [
                    {
                        "recipe": "Recipe",
                        "original": ["1 cup flour"],
                        "converted": ["125g flour"],
                        "serves": "4",
                        "tip": "Tip"
                    }
                ]
            }
        }
    ),
    SectionSchema(
        name=SectionType.TIPS.value,
        required_keys=("title",),
        optional_keys=("description", "tips", "items"),
        arrays=(
            ArrayField("tips", 1, StringItem()),
            ArrayField("items", 1, StringOrObjectItem()),
        ),
        rules=(OneOfArrays("tips", "items"),),
        example={
            "tips": {
                "title": "Tips",
                "description": "Optional description",
                "tips": ["Tip 1", "Tip 2"],
                "items": ["Item 1", "Item 2"]
            }
        },
        notes=('TIPS/RELATED: Need either "tips"/"links" or "items" (or both)',)
    ),
    _faq_schema(SectionType.FAQ.value, "FAQ"),
    _faq_schema(SectionType.FAQS.value, "FAQs"),
    SectionSchema(
        name=SectionType.RELATED.value,
        required_keys=("title",),
        optional_keys=("description", "links", "items"),
        arrays=(
            ArrayField("links", 1, StringItem()),
            ArrayField("items", 1, StringOrObjectItem()),
        ),
        rules=(OneOfArrays("links", "items"),),
        example={
            "related": {
                "title": "Related",
                "description": "Optional description",
                "links": ["link1", "link2"],
                "items": ["item1", "item2"]
            }
        },
        notes=('TIPS/RELATED: Need either "tips"/"links" or "items" (or both)',)
    ),
)

SECTION_SCHEMAS: Dict[str, SectionSchema] = {schema.name: schema for schema in _SCHEMAS}


def get_section_schema(name: str) -> Optional[SectionSchema]:
    """Schema for `name`, or None when the section type is unknown"""
    return SECTION_SCHEMAS.get(name)


def known_sections() -> List[str]:
    """Names of all known section types, in table order"""
    return list(SECTION_SCHEMAS)
