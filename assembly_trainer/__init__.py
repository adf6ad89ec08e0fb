"""PC assembly trainer — drag-and-drop build-a-PC exercise.

Packages:
  catalog   Zone catalog: components, drop zones, stages (catalog/*.json).
  geometry  Scene-coordinate points and rectangles.
  assembly  Snap engine, progression state machine, placement validator,
            feedback cues.
  web       FastAPI request/response surface for the browser UI.
"""
