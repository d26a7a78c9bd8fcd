"""
Application state module.

Holds the profile collection, the active selection and the current screen as
one explicit state object. Changes go through command functions; the runtime
persists each change before publishing it. Screens form a small state machine:
LANDING → ONBOARDING → DASHBOARD ⇄ SIMULATION ⇄ PROFILES.
"""
