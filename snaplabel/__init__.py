"""snaplabel: card artwork and YOLO label preparation for labelImg."""
