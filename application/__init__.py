"""
Application Layer for the RepCoach API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- session/: The guided workout session controller and rest timer
- use_cases/: Plan generation, weekly planner and exercise swap
- exceptions.py: Errors the routers translate to HTTP responses
"""
