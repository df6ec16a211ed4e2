"""Installing, updating and removing the dxm installation."""