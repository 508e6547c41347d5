"""
Business services for the trip planner.

- date_range.py: calendar tap -> date range selection
- binding.py: the single trip a device tracks
- trip_form.py: trip creation state machine and its async runner
- invite_confirmation.py: participant attendance confirmation
- trip_editor.py: owner-mode trip update and removal
- session.py: resume the bound trip at startup
- trip_details.py: important links and guest list
"""

__all__: list[str] = []
