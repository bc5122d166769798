"""Shared constants for prompt rendering and task specialization."""

from __future__ import annotations

DEFAULT_TEMPLATE = "default"
TEMPLATE_SUFFIX = ".md"

UNKNOWN_VALUE = "Unknown"
NO_FILES_FALLBACK = "None found"
NO_DEPENDENCIES_FALLBACK = "None"
DEPENDENCY_SUMMARY_LIMIT = 10

TASK_TYPES: tuple[str, ...] = (
    "feature",
    "bugfix",
    "optimization",
    "refactor",
    "security",
    "testing",
)

TASK_GUIDANCE: dict[str, str] = {
    "feature": """
## 🚀 FEATURE DEVELOPMENT INSTRUCTIONS
- Consider the existing component structure and patterns
- Follow the established coding conventions
- Ensure compatibility with the current technology stack
- Add appropriate tests if testing framework is available
- Update documentation if needed
""",
    "bugfix": """
## 🐛 BUG FIXING INSTRUCTIONS
- Analyze the error or issue carefully
- Check for similar patterns in existing code
- Ensure the fix doesn't break existing functionality
- Consider edge cases and error handling
- Test the fix thoroughly
""",
    "optimization": """
## ⚡ OPTIMIZATION INSTRUCTIONS
- Focus on performance bottlenecks
- Consider bundle size and loading times
- Look for code duplication and refactoring opportunities
- Optimize for the detected bundler and framework
- Maintain code readability and maintainability
""",
    "refactor": """
## 🔧 REFACTORING INSTRUCTIONS
- Maintain existing functionality
- Improve code structure and organization
- Follow best practices for the technology stack
- Ensure backward compatibility
- Update related documentation
""",
    "security": """
## 🔒 SECURITY AUDIT INSTRUCTIONS
- Review input validation and output encoding
- Check authentication and authorization flows
- Look for secrets committed to config or .env files
- Flag outdated or risky dependencies
- Suggest fixes ordered by severity
""",
    "testing": """
## 🧪 TEST IMPROVEMENT INSTRUCTIONS
- Identify untested components, pages and API routes
- Use the detected testing framework where one exists
- Cover edge cases and error paths, not only the happy path
- Keep tests fast, isolated and deterministic
- Suggest a test setup if no framework is detected
""",
}


__all__ = [
    "DEFAULT_TEMPLATE",
    "DEPENDENCY_SUMMARY_LIMIT",
    "NO_DEPENDENCIES_FALLBACK",
    "NO_FILES_FALLBACK",
    "TASK_GUIDANCE",
    "TASK_TYPES",
    "TEMPLATE_SUFFIX",
    "UNKNOWN_VALUE",
]
