"""Input-side helpers for Venmo statement exports."""
