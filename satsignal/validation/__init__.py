"""Profile field validation"""
