#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Interactive Interpreter Test Script
===================================

Try the utterance interpreter on real (and badly transcribed) queries.

    python interpret_interactive.py "red the file server.js"
    python interpret_interactive.py suite
    python interpret_interactive.py interactive
    python interpret_interactive.py --json "clear the chat"
"""

import sys
import io
import json

# Fix Windows console encoding
if sys.platform == 'win32':
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')

from voice_nlp import UtteranceInterpreter, MetaCommand, Task, Conversation, load_config


def test_query(interpreter, query, expected=None):
    """Interpret a single query and display results."""
    print(f"\n{'='*70}")
    print(f"Query: '{query}'")
    print(f"{'='*70}")

    result = interpreter.interpret(query)
    print(f"  Type: {result.type}")

    if isinstance(result, MetaCommand):
        label = result.action
        print(f"[+] Meta-command: {result.action}")
        print(f"  Confidence: {result.confidence:.2f}")
    elif isinstance(result, Task):
        label = result.intent
        print(f"[+] Task intent: {result.intent}")
        print(f"  Confidence: {result.confidence:.2f}")
        print(f"  Corrected: '{result.corrected_text}'")
        if result.file_paths:
            print(f"  File paths: {', '.join(result.file_paths)}")
    elif isinstance(result, Conversation):
        label = 'conversation'
        print("[-] No intent (general conversation)")
        print(f"  Corrected: '{result.corrected_text}'")
        if result.file_paths:
            print(f"  File paths: {', '.join(result.file_paths)}")
        for suggestion in interpreter.get_suggestions(query):
            print(f"  Suggestion: {suggestion}")
    else:
        label = 'empty'
        print("[-] Empty input")

    if expected and label != expected:
        print(f"  [!] Expected '{expected}', got '{label}'")

    return result


def run_test_suite():
    """Run the canned transcription-error suite."""
    print("\n" + "="*70)
    print("INTERPRETER TEST SUITE")
    print("="*70)

    interpreter = UtteranceInterpreter(load_config())

    print("\n\n### FILE OPERATIONS (with transcription errors) ###")
    test_query(interpreter, "red the file server.js", "file_read")
    test_query(interpreter, "right a file called test.txt", "file_write")
    test_query(interpreter, "the lead that file", "file_delete")

    print("\n\n### COMMANDS AND PACKAGES ###")
    test_query(interpreter, "in stall the express package", "install")
    test_query(interpreter, "one the script", "execute_command")

    print("\n\n### SEARCH ###")
    test_query(interpreter, "fine the text in my code", "search")

    print("\n\n### META COMMANDS ###")
    test_query(interpreter, "clear the chat", "reset")
    test_query(interpreter, "start over", "reset")
    test_query(interpreter, "scroll down", "scroll_down")
    test_query(interpreter, "coffee that response", "copy")

    print("\n\n### CONVERSATION (Should NOT trigger anything) ###")
    test_query(interpreter, "the quick brown fox jumps", "conversation")
    test_query(interpreter, "what a lovely day", "conversation")

    print("\n\n" + "="*70)
    print("TEST SUITE COMPLETE")
    print("="*70)


def interactive_mode():
    """Interactive mode - keep testing queries."""
    print("\n" + "="*70)
    print("INTERACTIVE INTERPRETER TEST")
    print("="*70)
    print("Enter utterances to interpret.")
    print("Type 'exit' or 'quit' to stop.\n")

    interpreter = UtteranceInterpreter(load_config())

    while True:
        try:
            query = input("\nEnter utterance > ").strip()

            if not query:
                continue

            if query.lower() in ['exit', 'quit', 'q']:
                print("Goodbye!")
                break

            if query.lower() == 'json':
                print("Prefix an utterance with 'json ' to see the raw result.")
                continue

            if query.lower().startswith('json '):
                result = interpreter.interpret(query[5:])
                print(json.dumps(result.to_dict(), indent=2))
                continue

            test_query(interpreter, query)

        except KeyboardInterrupt:
            print("\n\nGoodbye!")
            break
        except EOFError:
            print("\nGoodbye!")
            break


def main():
    """Main entry point."""

    if len(sys.argv) > 1:
        if sys.argv[1] == 'suite':
            run_test_suite()
        elif sys.argv[1] == 'interactive':
            interactive_mode()
        elif sys.argv[1] == '--json':
            query = ' '.join(sys.argv[2:])
            result = UtteranceInterpreter(load_config()).interpret(query)
            print(json.dumps(result.to_dict(), indent=2))
        else:
            # Interpret specific query
            query = ' '.join(sys.argv[1:])
            test_query(UtteranceInterpreter(load_config()), query)
    else:
        # Default: show menu
        print("\nInterpreter Test Options:")
        print("  1. Run full test suite")
        print("  2. Interactive mode")
        print("  3. Exit")

        choice = input("\nChoose option (1-3): ").strip()

        if choice == '1':
            run_test_suite()
        elif choice == '2':
            interactive_mode()
        else:
            print("Goodbye!")


if __name__ == "__main__":
    main()
