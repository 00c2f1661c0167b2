"""Infrastructure layer: concrete storage backends."""
