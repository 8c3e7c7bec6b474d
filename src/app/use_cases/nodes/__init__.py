from .list_nodes_use_case import ListNodesUseCase, to_node_dto
from .get_node_use_case import GetNodeUseCase
from .delete_node_use_case import DeleteNodeUseCase
from .dtos import NodeDTO, ListNodesResponseDTO, DeleteNodeResponseDTO

__all__ = [
    "ListNodesUseCase",
    "GetNodeUseCase",
    "DeleteNodeUseCase",
    "to_node_dto",
    "NodeDTO",
    "ListNodesResponseDTO",
    "DeleteNodeResponseDTO",
]
