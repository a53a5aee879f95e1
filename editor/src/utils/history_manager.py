"""
Undo/Redo History Manager for Shape Distribution Editor

Manages command history with undo/redo functionality.
Each entry is a Command holding a before patch and an after patch;
undo applies the before patch, redo re-applies the after patch.
"""

import logging

from constants import DEFAULT_MAX_HISTORY


class HistoryManager:
	"""Manages undo/redo history with command patches"""
	
	def __init__(self, document, max_history=DEFAULT_MAX_HISTORY):
		"""
		Initialize the history manager
		
		Args:
			document: Document the command patches are applied to
			max_history: Maximum number of commands to keep in history
		"""
		self.document = document
		self.max_history = max_history
		self.history = []  # List of {'command', 'description'} entries
		self.current_index = -1  # Index of the last applied command (-1 means none)
		self._listeners = []  # Callbacks to notify on state changes
		self._logger = logging.getLogger('History')
	
	def execute(self, command, description=""):
		"""
		Apply a command's after patch and record it
		
		Args:
			command: Command to apply
			description: Optional description of the change
		"""
		self.document.apply_patch(command.after)
		self.record(command, description)
	
	def record(self, command, description=""):
		"""
		Record a command whose after state is already applied
		
		Args:
			command: Command to record
			description: Optional description of the change
		"""
		# If we're not at the end of history, drop the redo tail
		if self.current_index < len(self.history) - 1:
			self.history = self.history[:self.current_index + 1]
		
		self.history.append({
			'command': command,
			'description': description or command.id
		})
		self.current_index += 1
		
		# Trim history if it exceeds max_history
		if len(self.history) > self.max_history:
			self.history.pop(0)
			self.current_index -= 1
		
		self._notify_listeners()
		
		self._logger.debug(f"Recorded: {self.get_current_description()} (index: {self.current_index}, total: {len(self.history)})")
	
	def undo(self):
		"""
		Revert the current command
		
		Returns:
			The reverted Command, or None if there is nothing to undo
		"""
		if not self.can_undo():
			self._logger.debug("Cannot undo - at beginning of history")
			return None
		
		entry = self.history[self.current_index]
		self.document.apply_patch(entry['command'].before)
		self.current_index -= 1
		
		self._notify_listeners()
		
		self._logger.debug(f"Undo: {entry['description']} (index: {self.current_index})")
		return entry['command']
	
	def redo(self):
		"""
		Re-apply the next command
		
		Returns:
			The re-applied Command, or None if there is nothing to redo
		"""
		if not self.can_redo():
			self._logger.debug("Cannot redo - at end of history")
			return None
		
		entry = self.history[self.current_index + 1]
		self.document.apply_patch(entry['command'].after)
		self.current_index += 1
		
		self._notify_listeners()
		
		self._logger.debug(f"Redo: {entry['description']} (index: {self.current_index})")
		return entry['command']
	
	def can_undo(self):
		"""Check if undo is available"""
		return self.current_index >= 0
	
	def can_redo(self):
		"""Check if redo is available"""
		return self.current_index < len(self.history) - 1
	
	def clear(self):
		"""Clear all history"""
		self.history = []
		self.current_index = -1
		self._notify_listeners()
		self._logger.debug("History cleared")
	
	def add_listener(self, callback):
		"""
		Subscribe to undo/redo availability changes
		
		Args:
			callback: Called as callback(can_undo, can_redo) after every record, undo, redo and clear
		"""
		self._listeners.append(callback)
	
	def remove_listener(self, callback):
		"""Remove a listener"""
		if callback in self._listeners:
			self._listeners.remove(callback)
	
	def _notify_listeners(self):
		"""Send (can_undo, can_redo) to every listener; a failing listener is logged and skipped"""
		can_undo, can_redo = self.can_undo(), self.can_redo()
		# Copy so a listener may remove itself while being notified
		for callback in list(self._listeners):
			try:
				callback(can_undo, can_redo)
			except Exception as e:
				self._logger.error(f"History listener {callback!r} failed: {e}")
	
	def get_current_description(self):
		"""Get the description of the last applied command ("" when none is applied)"""
		entry = self._entry_at(self.current_index)
		return entry['description'] if entry else ""
	
	def get_undo_description(self):
		"""
		Describe what undo() would do next
		
		undo() re-applies the before patch of the last applied command,
		so this is that command's description.
		"""
		return self.get_current_description()
	
	def get_redo_description(self):
		"""Describe the command whose after patch redo() would re-apply"""
		entry = self._entry_at(self.current_index + 1)
		return entry['description'] if entry else ""
	
	def _entry_at(self, index):
		if 0 <= index < len(self.history):
			return self.history[index]
		return None
