"""Shape distribution operations - distribute selection horizontally or vertically"""
import logging

from constants import MIN_DISTRIBUTE_COUNT
from models.command import DistributeType
from services.distribution import distribute_shapes


class DistributeActions:
	"""Handles distribute operations on the current selection"""
	
	def __init__(self, document, history_manager):
		"""Initialize with the document and its history
		
		Args:
			document: Document holding the shapes and selection
			history_manager: HistoryManager recording the commands
		"""
		self.document = document
		self.history_manager = history_manager
		self._logger = logging.getLogger('Distribute')
	
	def distribute(self, distribute_type):
		"""Distribute the selected shapes
		
		Args:
			distribute_type: DistributeType (or 'horizontal' / 'vertical')
		
		Returns:
			The recorded Command, or None when too few shapes are selected
		"""
		distribute_type = DistributeType(distribute_type)
		selected_ids = self.document.get_selected_ids()
		if len(selected_ids) < MIN_DISTRIBUTE_COUNT:
			self._logger.info(
				f"Select at least {MIN_DISTRIBUTE_COUNT} shapes to distribute "
				f"({len(selected_ids)} selected)"
			)
			return None
		
		command = distribute_shapes(self.document, selected_ids, distribute_type)
		
		# Document already holds the after state
		self.history_manager.record(command, f"Distribute {distribute_type.value}")
		return command
	
	def distribute_horizontal(self):
		"""Distribute selected shapes along the x axis"""
		return self.distribute(DistributeType.HORIZONTAL)
	
	def distribute_vertical(self):
		"""Distribute selected shapes along the y axis"""
		return self.distribute(DistributeType.VERTICAL)
