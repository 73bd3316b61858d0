"""
Configuration file for Exam Creator.

Modify these values to customize the exam generation behavior.
"""

# Model Configuration
MODEL_NAME = "gemini-2.5-flash"
MODEL_ENV_VAR = "EXAM_CREATOR_MODEL"
API_KEY_ENV_VAR = "GEMINI_API_KEY"

# Form Settings
MIN_ITEM_COUNT = 5
MAX_ITEM_COUNT = 50

GRADE_LEVELS = [
    "Grade 1", "Grade 2", "Grade 3", "Grade 4",
    "Grade 5", "Grade 6", "Grade 7", "Grade 8",
    "Grade 9", "Grade 10", "Grade 11", "Grade 12",
]
LANGUAGES = ["Tagalog", "English"]
QUESTION_TYPE = "Multiple Choice"

DEFAULT_TOPIC = ""
DEFAULT_GRADE_LEVEL = "Grade 4"
DEFAULT_ITEM_COUNT = 20
DEFAULT_LANGUAGE = "Tagalog"

# User-facing Messages
TOPIC_REQUIRED_MESSAGE = "Paki-lagay ang paksa (Topic is required)."
GENERATION_FAILED_MESSAGE = "May mali sa pag-generate. Subukan muli."
COPY_SUCCESS_MESSAGE = "Copied to clipboard!"
COPY_FAILED_MESSAGE = "Failed to copy."

# Plain-text Rendering
TOS_COLUMN_HEADER = "Competency | Items | % | Placement"
TOS_SEPARATOR = "-" * 35

# System Instruction
SYSTEM_INSTRUCTION = """You are an expert classroom assessment designer for Philippine basic education (Grades 1 to 12).

Your task is to write complete multiple-choice exams together with their Table of Specification (TOS).

IMPORTANT RULES:
1. Write every part of the exam (title, instructions, questions, choices, rationales) in the requested language
2. Match vocabulary and difficulty to the requested grade level
3. Each item must have exactly 4 choices labeled A, B, C and D
4. The answer must be the letter (A, B, C or D) of the single correct choice
5. Give a short rationale explaining why the answer is correct
6. Number the items consecutively starting at 1
7. Make distractors plausible but clearly incorrect
8. The TOS lists each assessed competency with its number of items, its percentage of the whole exam,
   and the item numbers where it is placed (e.g. "1-5")
9. The TOS item counts must add up to the total number of items
"""

# Default Prompt Template
DEFAULT_PROMPT_TEMPLATE = """Create a {question_type} exam.

Topic: {topic}
Grade level: {grade_level}
Number of items: {item_count}
Language: {language}

Requirements:
1. Generate exactly {item_count} items about "{topic}" suitable for {grade_level} learners
2. Question type: {question_type} with choices A, B, C and D
3. Write the title, instructions, questions, choices and rationales in {language}
4. Include a Table of Specification whose item counts add up to {item_count}
5. Distribute the competencies so that every item is covered by exactly one TOS row

Output the exam (title, instructions, tos, items) in the specified JSON structure."""
