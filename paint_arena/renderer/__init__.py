"""Rendering subpackage.

Turns :class:`~paint_arena.snapshot.RenderSnapshot` views into Pillow
images. The renderer focuses on:

* Flat team-colored tiles with thin grid lines.
* Small pixel-art characters whose eyes and paint nozzle follow their facing
  and whose paint tank bobs with the animation phase.
* A game-over overlay with the frozen result once the match has ended.

See :mod:`paint_arena.renderer.canvas` for the drawing routines.
"""
