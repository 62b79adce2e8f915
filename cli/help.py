#!/usr/bin/env python3
"""
Help System Module for the NFT Collection Wizard CLI

Provides usage examples and troubleshooting notes for the wizard commands.
"""

from typing import Dict, List, Optional, Tuple

# Command examples database
COMMAND_EXAMPLES: Dict[str, List[Tuple[str, str]]] = {
    'init-config': [
        ('Run the wizard and print the schema as a table',
         'nftwizard init-config'),
        ('Save the schema as YAML',
         'nftwizard init-config --output-file collection.yml'),
        ('Print JSON and stop after the first rejected answer per field',
         'nftwizard -o json init-config --max-attempts 1'),
        ('Use a project configuration file with debug logging',
         'nftwizard -c .nftwizard.yml -vv init-config'),
    ],
}

TROUBLESHOOTING_GUIDES = {
    'address': """
Listing addresses must be exactly 20 bytes long once encoded as UTF-8.
The wizard keeps asking until an address of that length is entered.
""",
    'retries': """
When an answer breaks a collection rule (for example a zero supply limit),
only that question is asked again. After wizard.max_field_attempts rejected
answers the session ends; raise the limit in .nftwizard.yml or with
NFTWIZARD_WIZARD_MAX_FIELD_ATTEMPTS.
""",
}


def get_command_examples(command: str) -> List[Tuple[str, str]]:
    """
    Get examples for a specific command.

    Returns:
        List of (description, example) tuples
    """
    return COMMAND_EXAMPLES.get(command, [])


def get_troubleshooting_guide(issue_type: Optional[str] = None) -> str:
    """Return one troubleshooting guide, or all of them when no type is given."""
    if issue_type:
        return TROUBLESHOOTING_GUIDES.get(issue_type, f"No troubleshooting guide for '{issue_type}'")
    return '\n'.join(guide.strip() + '\n' for guide in TROUBLESHOOTING_GUIDES.values())


def format_examples_help(examples: List[Tuple[str, str]]) -> str:
    """
    Format examples for display in help text.

    Args:
        examples: List of (description, example) tuples

    Returns:
        Formatted help text with examples
    """
    if not examples:
        return ""

    text = "\nExamples:\n"
    for description, example in examples:
        text += f"\n  # {description}\n"
        text += f"  {example}\n"

    return text
