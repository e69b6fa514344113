#!/usr/bin/env python3
"""Symbol Recognition Demo with Visual Feedback.

Draw a ">", "<" or "=" with the mouse; each stroke is classified when the
button is released and the result is shown under the drawing area.
"""

import json
import logging
from typing import List, Dict, Tuple

import pygame

from symbol_recognizer import StrokeSession, StrokeOutcome
from symbol_recognizer.utils.logger import RecognitionLogger

SAVE_FILE = "saved_stroke.json"


class SymbolRecognitionDemo:
    """Interactive demo for symbol recognition."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((1200, 900))
        pygame.display.set_caption("Symbol Recognition Demo")

        self.session = StrokeSession(logger=RecognitionLogger())
        self.current_path: List[Dict] = []
        self.last_stroke: List[Dict] = []
        self.is_drawing = False
        self.message: str | None = None

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.GREEN = (0, 160, 0)
        self.GRAY = (128, 128, 128)
        self.CANVAS = (245, 245, 245)

        # Fonts
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 32)

        self.drawing_area = pygame.Rect(300, 150, 600, 600)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1 and self.drawing_area.collidepoint(event.pos):
                        self.start_drawing(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    if self.is_drawing:
                        self.add_point(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1 and self.is_drawing:
                        self.finish_drawing()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_c:
                        self.clear_screen()
                    elif event.key == pygame.K_s:
                        self.save_stroke()
                    elif event.key == pygame.K_l:
                        self.load_stroke()

            self.draw()
            clock.tick(60)

    def start_drawing(self, pos: Tuple[int, int]) -> None:
        """Start a new stroke."""
        self.current_path = []
        self.is_drawing = True
        self.message = None
        self.add_point(pos)

    def add_point(self, pos: Tuple[int, int]) -> None:
        """Add a point to the current stroke."""
        x, y = pos
        self.current_path.append({"x": float(x), "y": float(y)})

    def finish_drawing(self) -> None:
        """Finish the stroke and hand it to the session."""
        self.is_drawing = False
        self.last_stroke = self.current_path
        self.current_path = []
        self.session.handle_stroke(self.last_stroke)

    def clear_screen(self) -> None:
        """Clear the strokes and result."""
        self.current_path = []
        self.last_stroke = []
        self.message = None
        self.session.clear()

    def save_stroke(self) -> None:
        """Save the last stroke to a JSON file."""
        if not self.last_stroke:
            return
        outcome = self.session.current
        data = {
            "path": self.last_stroke,
            "recognized_as": outcome.label if outcome else None,
            "confidence": outcome.confidence if outcome else 0,
        }
        with open(SAVE_FILE, "w") as f:
            json.dump(data, f, indent=2)
        self.message = f"Saved to {SAVE_FILE}"

    def load_stroke(self) -> None:
        """Load a saved stroke and classify it again."""
        try:
            with open(SAVE_FILE, "r") as f:
                data = json.load(f)
        except FileNotFoundError:
            self.message = "No saved stroke found"
            return
        except json.JSONDecodeError as e:
            self.message = f"Bad save file: {e}"
            return
        self.last_stroke = data.get("path", [])
        self.session.handle_stroke(self.last_stroke)

    def _draw_result(self, outcome: StrokeOutcome) -> None:
        result_text = f"Recognized Symbol: {outcome.label or 'None'}"
        self.screen.blit(self.font.render(result_text, True, self.GREEN), (300, 780))
        if outcome.confidence > 0:
            score_text = f"Confidence: {outcome.confidence:.1f}%"
            self.screen.blit(self.small_font.render(score_text, True, self.GRAY), (300, 830))

    def draw(self) -> None:
        """Render the UI, retained strokes and the stroke in progress."""
        self.screen.fill(self.WHITE)
        pygame.draw.rect(self.screen, self.CANVAS, self.drawing_area)
        pygame.draw.rect(self.screen, self.GRAY, self.drawing_area, 3)

        instructions = [
            "Draw a symbol in the box: >  <  =",
            "C: Clear   S: Save last stroke   L: Load stroke",
        ]
        y = 10
        for line in instructions:
            self.screen.blit(self.small_font.render(line, True, self.BLACK), (10, y))
            y += 30

        for path in self.session.paths:
            pts = [(p.x, p.y) for p in path]
            if len(pts) > 1:
                pygame.draw.lines(self.screen, self.BLACK, False, pts, 3)

        if len(self.current_path) > 1:
            pts = [(p["x"], p["y"]) for p in self.current_path]
            pygame.draw.lines(self.screen, self.BLACK, False, pts, 3)

        if self.session.current:
            self._draw_result(self.session.current)
        if self.message:
            self.screen.blit(self.small_font.render(self.message, True, self.GRAY), (10, 860))
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    logging.basicConfig(level=logging.INFO)
    demo = SymbolRecognitionDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        demo.session.logger.close()
        pygame.quit()


if __name__ == "__main__":
    main()
