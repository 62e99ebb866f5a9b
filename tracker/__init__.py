"""Study tracker - plan, progress log and reporting."""
