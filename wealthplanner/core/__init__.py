"""Pure calculation core: recurrence rules, wealth curve simulation, planning analytics."""
