"""NiceGUI page app rendering the engagement charts."""
