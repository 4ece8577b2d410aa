"""Cross-cutting helpers: settings, logging, errors, security and database access."""
